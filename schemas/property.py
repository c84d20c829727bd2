# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models import PropertyStatus, PropertyType
from schemas.valuation import YieldFigures


class PropertyCreate(BaseModel):
     """Schema for registering a property."""
     name: str = Field(..., min_length=1, max_length=255)
     property_type: PropertyType = PropertyType.APARTMENT
     address: str = Field(..., min_length=1, max_length=500)
     address_detail: Optional[str] = None
     area: Optional[Decimal] = Field(None, ge=0)
     purchase_price: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
     purchase_date: date
     acquisition_cost: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     loan_amount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     loan_interest_rate: Decimal = Field(default=Decimal("0"), ge=0, max_digits=5, decimal_places=2, description="Annual %")
     current_value: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
     status: PropertyStatus = PropertyStatus.VACANT
     memo: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Mapo Officetel 1203",
                    "property_type": "OFFICETEL",
                    "address": "Seoul Mapo-gu",
                    "purchase_price": 200000000,
                    "purchase_date": "2022-03-15",
                    "acquisition_cost": 9000000,
                    "loan_amount": 100000000,
                    "loan_interest_rate": 4.5
               }
          }
     )


class PropertyUpdate(BaseModel):
     """Schema for editing a property; only provided fields change."""
     name: Optional[str] = Field(None, min_length=1, max_length=255)
     property_type: Optional[PropertyType] = None
     address: Optional[str] = None
     address_detail: Optional[str] = None
     area: Optional[Decimal] = Field(None, ge=0)
     purchase_price: Optional[Decimal] = Field(None, ge=0)
     purchase_date: Optional[date] = None
     acquisition_cost: Optional[Decimal] = Field(None, ge=0)
     loan_amount: Optional[Decimal] = Field(None, ge=0)
     loan_interest_rate: Optional[Decimal] = Field(None, ge=0)
     current_value: Optional[Decimal] = Field(None, ge=0)
     status: Optional[PropertyStatus] = None
     memo: Optional[str] = None


class PropertyResponse(BaseModel):
     id: int
     owner_id: int
     name: str
     property_type: PropertyType
     address: str
     address_detail: Optional[str] = None
     area: Optional[Decimal] = None
     purchase_price: Decimal
     purchase_date: date
     acquisition_cost: Decimal
     loan_amount: Decimal
     loan_interest_rate: Decimal
     current_value: Optional[Decimal] = None
     status: PropertyStatus
     memo: Optional[str] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class PropertyRef(BaseModel):
     id: int
     name: str
     status: PropertyStatus


class PropertySummaryResponse(BaseModel):
     """Collected rent and costs for the current calendar year."""
     property: PropertyRef
     current_year: int
     monthly_rent_total: Decimal
     annual_rent: Decimal
     annual_expense: Decimal
     net_income: Decimal
     total_investment: Decimal
     yields: YieldFigures
