# routers/expenses.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from models import ExpenseType
from schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseSummaryResponse, ExpenseUpdate
from services import ExpenseService

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse], summary="List expenses")
def list_expenses(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     expense_type: Optional[ExpenseType] = Query(None, description="Filter by type"),
     year: Optional[int] = Query(None, description="Filter by calendar year"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return ExpenseService(db).list_expenses(owner_id, property_id=property_id, expense_type=expense_type, year=year)


@router.get("/summary", response_model=ExpenseSummaryResponse, summary="Yearly expense summary")
def get_expense_summary(
     year: Optional[int] = Query(None, description="Calendar year (default: current)"),
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return ExpenseService(db).summary(owner_id, year=year, property_id=property_id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED, summary="Record an expense")
def create_expense(
     body: ExpenseCreate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     data = body.model_dump()
     property_id = data.pop("property_id")
     expense = ExpenseService(db).create_expense(owner_id, property_id, data)
     db.commit()
     db.refresh(expense)
     return expense


@router.get("/{expense_id}", response_model=ExpenseResponse, summary="Get expense by ID")
def get_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return ExpenseService(db).get_expense(owner_id, expense_id)


@router.put("/{expense_id}", response_model=ExpenseResponse, summary="Update expense")
def update_expense(
     expense_id: int,
     body: ExpenseUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     expense = ExpenseService(db).update_expense(owner_id, expense_id, body.model_dump(exclude_unset=True))
     db.commit()
     db.refresh(expense)
     return expense


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete expense")
def delete_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     ExpenseService(db).delete_expense(owner_id, expense_id)
     db.commit()
     return None
