# services/__init__.py
from .rent_schedule_service import RentScheduleService
from .overdue_service import OverdueService
from .valuation_service import ValuationService
from .portfolio_service import PortfolioService
from .lease_service import LeaseService, on_lease_status_changed
from .property_service import PropertyService
from .tenant_service import TenantService
from .expense_service import ExpenseService

__all__ = [
     "RentScheduleService",
     "OverdueService",
     "ValuationService",
     "PortfolioService",
     "LeaseService",
     "on_lease_status_changed",
     "PropertyService",
     "TenantService",
     "ExpenseService",
]
