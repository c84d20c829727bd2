# schemas/lease.py
"""
Pydantic schemas for Lease API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models import LeaseStatus, LeaseType


class LeaseCreate(BaseModel):
     """Schema for creating a lease on an owned property."""
     property_id: int = Field(..., gt=0)
     tenant_id: int = Field(..., gt=0)
     floor: Optional[str] = Field(None, max_length=20)
     area_pyeong: Optional[Decimal] = Field(None, ge=0)
     lease_type: LeaseType
     deposit: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     monthly_rent: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     management_fee: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     has_vat: bool = False
     start_date: date
     end_date: date
     rent_due_day: int = Field(default=1, ge=1, le=31, description="Day of month rent is due")
     memo: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "tenant_id": 1,
                    "lease_type": "HALF_JEONSE",
                    "deposit": 100000000,
                    "monthly_rent": 3500000,
                    "management_fee": 300000,
                    "start_date": "2026-01-01",
                    "end_date": "2027-12-31",
                    "rent_due_day": 25
               }
          }
     )


class LeaseUpdate(BaseModel):
     """Schema for editing lease terms; only provided fields change."""
     floor: Optional[str] = None
     area_pyeong: Optional[Decimal] = None
     lease_type: Optional[LeaseType] = None
     deposit: Optional[Decimal] = Field(None, ge=0)
     monthly_rent: Optional[Decimal] = Field(None, ge=0)
     management_fee: Optional[Decimal] = Field(None, ge=0)
     has_vat: Optional[bool] = None
     start_date: Optional[date] = None
     end_date: Optional[date] = None
     rent_due_day: Optional[int] = Field(None, ge=1, le=31)
     memo: Optional[str] = None


class LeaseStatusUpdate(BaseModel):
     status: LeaseStatus


class LeaseRenew(BaseModel):
     """Terms for the successor lease; omitted amounts are copied from the old lease."""
     start_date: date
     end_date: date
     deposit: Optional[Decimal] = Field(None, ge=0)
     monthly_rent: Optional[Decimal] = Field(None, ge=0)
     management_fee: Optional[Decimal] = Field(None, ge=0)
     rent_due_day: Optional[int] = Field(None, ge=1, le=31)


class LeaseResponse(BaseModel):
     id: int
     property_id: int
     tenant_id: Optional[int] = None
     floor: Optional[str] = None
     area_pyeong: Optional[Decimal] = None
     lease_type: LeaseType
     deposit: Decimal
     monthly_rent: Decimal
     management_fee: Decimal
     has_vat: bool
     start_date: date
     end_date: date
     rent_due_day: int
     status: LeaseStatus
     memo: Optional[str] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
