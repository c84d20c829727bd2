# schemas/expense.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from models import ExpenseType


class ExpenseCreate(BaseModel):
     property_id: int = Field(..., gt=0)
     expense_type: ExpenseType
     amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
     expense_date: date
     description: Optional[str] = Field(None, max_length=500)
     is_recurring: bool = False
     recurring_month: Optional[int] = Field(None, ge=1, le=12)
     memo: Optional[str] = None


class ExpenseUpdate(BaseModel):
     """Partial edit; omitted fields keep their stored values."""
     expense_type: Optional[ExpenseType] = None
     amount: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
     expense_date: Optional[date] = None
     description: Optional[str] = Field(None, max_length=500)
     is_recurring: Optional[bool] = None
     recurring_month: Optional[int] = Field(None, ge=1, le=12)
     memo: Optional[str] = None


class ExpenseResponse(BaseModel):
     id: int
     property_id: int
     expense_type: ExpenseType
     amount: Decimal
     expense_date: date
     description: Optional[str] = None
     is_recurring: bool
     recurring_month: Optional[int] = None
     memo: Optional[str] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class ExpenseTypeTotal(BaseModel):
     type: ExpenseType
     amount: Decimal
     count: int


class ExpenseMonthTotal(BaseModel):
     month: int
     amount: Decimal


class ExpenseSummaryResponse(BaseModel):
     year: int
     total: Decimal
     by_type: List[ExpenseTypeTotal]
     by_month: List[ExpenseMonthTotal]
