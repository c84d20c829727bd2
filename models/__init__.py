# models/__init__.py
from .base import Base
from .user import User
from .property import Property, PropertyStatus, PropertyType
from .tenant import Tenant
from .lease import Lease, LeaseStatus, LeaseType
from .rent_payment import RentPayment, PaymentStatus, PaymentMethod
from .expense import Expense, ExpenseType
from .property_valuation import PropertyValuation

__all__ = [
     "Base",
     "User",
     "Property",
     "PropertyStatus",
     "PropertyType",
     "Tenant",
     "Lease",
     "LeaseStatus",
     "LeaseType",
     "RentPayment",
     "PaymentStatus",
     "PaymentMethod",
     "Expense",
     "ExpenseType",
     "PropertyValuation",
]
