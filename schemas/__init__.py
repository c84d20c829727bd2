# schemas/__init__.py
from .rent_payment import (
     RentPaymentCreate,
     RentPaymentUpdate,
     RentPaymentStatusUpdate,
     RentPaymentResponse,
     RentScheduleRequest,
     RentScheduleResponse,
)
from .valuation import (
     ValuationRequest,
     ValuationResponse,
     ValuationResult,
     PortfolioSummary,
)

__all__ = [
     "RentPaymentCreate",
     "RentPaymentUpdate",
     "RentPaymentStatusUpdate",
     "RentPaymentResponse",
     "RentScheduleRequest",
     "RentScheduleResponse",
     "ValuationRequest",
     "ValuationResponse",
     "ValuationResult",
     "PortfolioSummary",
]
