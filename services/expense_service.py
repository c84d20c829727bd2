# services/expense_service.py
"""
Expense Service - property costs and their yearly breakdown.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Expense, ExpenseType, Property
from services import access
from services.money import ZERO, to_decimal, year_window


class ExpenseService:

     def __init__(self, db: Session):
          self.db = db

     def _owned(self, owner_id: int):
          return (
               self.db.query(Expense)
               .join(Property, Expense.property_id == Property.id)
               .filter(Property.owner_id == owner_id)
          )

     def create_expense(self, owner_id: int, property_id: int, data: dict) -> Expense:
          prop = access.get_owned_property(self.db, owner_id, property_id)
          expense = Expense(property_id=prop.id, **data)
          expense.amount = to_decimal(expense.amount)
          if expense.is_recurring is None:
               expense.is_recurring = False
          self.db.add(expense)
          self.db.flush()
          return expense

     def list_expenses(
          self,
          owner_id: int,
          property_id: Optional[int] = None,
          expense_type: Optional[ExpenseType] = None,
          year: Optional[int] = None,
     ) -> List[Expense]:
          query = self._owned(owner_id)
          if property_id:
               query = query.filter(Expense.property_id == property_id)
          if expense_type:
               query = query.filter(Expense.expense_type == expense_type)
          if year:
               query = query.filter(Expense.expense_date >= date(year, 1, 1), Expense.expense_date < date(year + 1, 1, 1))
          return query.order_by(Expense.expense_date.desc()).all()

     def get_expense(self, owner_id: int, expense_id: int) -> Expense:
          return access.get_owned_expense(self.db, owner_id, expense_id)

     def update_expense(self, owner_id: int, expense_id: int, changes: dict) -> Expense:
          expense = access.get_owned_expense(self.db, owner_id, expense_id)
          for field, value in changes.items():
               if value is None:
                    continue
               if field == "amount":
                    value = to_decimal(value)
               setattr(expense, field, value)
          self.db.flush()
          return expense

     def delete_expense(self, owner_id: int, expense_id: int) -> None:
          expense = access.get_owned_expense(self.db, owner_id, expense_id)
          self.db.delete(expense)
          self.db.flush()

     def summary(
          self,
          owner_id: int,
          year: Optional[int] = None,
          property_id: Optional[int] = None,
          now: Optional[datetime] = None,
     ) -> dict:
          """
          Totals for one calendar year (default: the current one), by
          expense type and by month. All twelve months are always present.
          """
          if year is None:
               start, end = year_window(now)
               year = start.year
          else:
               start, end = date(year, 1, 1), date(year + 1, 1, 1)

          query = self._owned(owner_id).filter(Expense.expense_date >= start, Expense.expense_date < end)
          if property_id:
               query = query.filter(Expense.property_id == property_id)
          expenses = query.all()

          by_type = {}
          by_month = {month: ZERO for month in range(1, 13)}
          for expense in expenses:
               amount = to_decimal(expense.amount)
               bucket = by_type.setdefault(expense.expense_type, {"amount": ZERO, "count": 0})
               bucket["amount"] += amount
               bucket["count"] += 1
               by_month[expense.expense_date.month] += amount

          total: Decimal = sum(by_month.values(), ZERO)
          return {
               "year": year,
               "total": total,
               "by_type": [
                    {"type": expense_type, "amount": bucket["amount"], "count": bucket["count"]}
                    for expense_type, bucket in by_type.items()
               ],
               "by_month": [{"month": month, "amount": amount} for month, amount in by_month.items()],
          }
