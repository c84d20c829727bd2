# schemas/valuation.py
"""
Pydantic schemas for valuation and portfolio responses.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from models import PropertyStatus


class ValuationRequest(BaseModel):
     property_id: int = Field(..., gt=0)
     target_yield: Optional[Decimal] = Field(None, gt=0, le=100, description="Target yield in percent (default 5)")
     memo: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "target_yield": 5.0
               }
          }
     )


class ValuationResponse(BaseModel):
     """Stored snapshot; annual_expense includes loan interest."""
     id: int
     property_id: int
     annual_rent: Decimal
     total_deposit: Decimal
     annual_expense: Decimal
     net_income: Decimal
     total_investment: Decimal
     gross_yield: Decimal
     net_yield: Decimal
     cash_on_cash: Decimal
     target_yield: Decimal
     suggested_price: Decimal
     expected_profit: Decimal
     memo: Optional[str] = None
     calculated_at: datetime

     model_config = ConfigDict(from_attributes=True)


class YieldFigures(BaseModel):
     gross_yield: Decimal
     net_yield: Decimal
     cash_on_cash: Decimal


class ValuationDetails(BaseModel):
     """Intermediate figures returned for display only; not persisted."""
     monthly_rent: Decimal
     annual_rent: Decimal
     total_deposit: Decimal
     annual_expense: Decimal
     loan_interest: Decimal
     total_annual_expense: Decimal
     net_income: Decimal
     purchase_price: Decimal
     acquisition_cost: Decimal
     loan_amount: Decimal
     total_investment: Decimal
     yields: YieldFigures
     target_yield: Decimal
     suggested_price: Decimal
     expected_profit: Decimal


class ValuationResult(BaseModel):
     valuation: ValuationResponse
     details: ValuationDetails


class PortfolioFinancials(BaseModel):
     total_purchase_price: Decimal
     total_current_value: Decimal
     total_loan_amount: Decimal
     total_equity: Decimal
     total_monthly_rent: Decimal
     total_annual_rent: Decimal
     total_annual_expense: Decimal
     total_net_income: Decimal


class PortfolioYields(BaseModel):
     avg_gross_yield: Decimal
     avg_net_yield: Decimal
     avg_cash_on_cash: Decimal


class PortfolioPropertyItem(BaseModel):
     id: int
     name: str
     status: PropertyStatus
     purchase_price: Decimal
     current_value: Decimal
     monthly_rent: Decimal
     lease_count: int


class PortfolioSummary(BaseModel):
     total_properties: int
     occupied_count: int
     vacant_count: int
     financials: PortfolioFinancials
     yields: PortfolioYields
     properties: List[PortfolioPropertyItem]
