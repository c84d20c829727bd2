# schemas/rent_payment.py
"""
Pydantic schemas for rent payment API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models import PaymentMethod, PaymentStatus


class RentPaymentCreate(BaseModel):
     """Schema for recording a single payment row."""
     lease_id: int = Field(..., gt=0)
     payment_year: int = Field(..., ge=1900, le=9999)
     payment_month: int = Field(..., ge=1, le=12)
     due_date: date
     payment_date: Optional[datetime] = None
     rent_amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
     management_fee_amount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     payment_method: PaymentMethod = PaymentMethod.TRANSFER
     rent_status: PaymentStatus = PaymentStatus.PENDING
     management_fee_status: PaymentStatus = PaymentStatus.PENDING
     memo: Optional[str] = None


class RentPaymentUpdate(BaseModel):
     """Partial edit; total_amount is recomputed server-side."""
     due_date: Optional[date] = None
     payment_date: Optional[datetime] = None
     rent_amount: Optional[Decimal] = Field(None, ge=0)
     management_fee_amount: Optional[Decimal] = Field(None, ge=0)
     payment_method: Optional[PaymentMethod] = None
     rent_status: Optional[PaymentStatus] = None
     management_fee_status: Optional[PaymentStatus] = None
     memo: Optional[str] = None


class RentPaymentStatusUpdate(BaseModel):
     rent_status: Optional[PaymentStatus] = None
     management_fee_status: Optional[PaymentStatus] = None
     payment_date: Optional[datetime] = None


class RentScheduleRequest(BaseModel):
     """Inclusive month range to generate payment rows for."""
     lease_id: int = Field(..., gt=0)
     start_year: int = Field(..., ge=1900, le=9999)
     start_month: int = Field(..., ge=1, le=12)
     end_year: int = Field(..., ge=1900, le=9999)
     end_month: int = Field(..., ge=1, le=12)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "lease_id": 1,
                    "start_year": 2026,
                    "start_month": 1,
                    "end_year": 2026,
                    "end_month": 12
               }
          }
     )


class RentScheduleResponse(BaseModel):
     message: str
     count: int


class RentPaymentResponse(BaseModel):
     id: int
     lease_id: int
     payment_year: int
     payment_month: int
     due_date: date
     payment_date: Optional[datetime] = None
     rent_amount: Decimal
     management_fee_amount: Decimal
     total_amount: Decimal
     payment_method: PaymentMethod
     rent_status: PaymentStatus
     management_fee_status: PaymentStatus
     memo: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
