# tests/test_expense.py
from datetime import date, datetime
from decimal import Decimal

import pytest

from errors import NotFoundError
from models import ExpenseType
from services import ExpenseService


def _record(service, owner, prop, expense_type, amount, on):
     return service.create_expense(
          owner.id, prop.id, {"expense_type": expense_type, "amount": Decimal(amount), "expense_date": on}
     )


def test_summary_groups_by_type_and_month(db, owner, make_property):
     prop = make_property(owner)
     service = ExpenseService(db)
     _record(service, owner, prop, ExpenseType.MAINTENANCE, "200000", date(2026, 2, 3))
     _record(service, owner, prop, ExpenseType.MAINTENANCE, "300000", date(2026, 2, 20))
     _record(service, owner, prop, ExpenseType.PROPERTY_TAX, "1500000", date(2026, 7, 31))
     _record(service, owner, prop, ExpenseType.PROPERTY_TAX, "9999999", date(2025, 7, 31))

     summary = service.summary(owner.id, now=datetime(2026, 10, 1))

     assert summary["year"] == 2026
     assert summary["total"] == Decimal("2000000")
     by_type = {row["type"]: row for row in summary["by_type"]}
     assert by_type[ExpenseType.MAINTENANCE]["amount"] == Decimal("500000")
     assert by_type[ExpenseType.MAINTENANCE]["count"] == 2
     assert by_type[ExpenseType.PROPERTY_TAX]["count"] == 1
     assert len(summary["by_month"]) == 12
     assert summary["by_month"][1]["amount"] == Decimal("500000")
     assert summary["by_month"][0]["amount"] == Decimal("0")

     assert service.summary(owner.id, year=2025)["total"] == Decimal("9999999")


def test_expenses_are_owner_scoped(db, owner, other_owner, make_property):
     service = ExpenseService(db)
     foreign = make_property(other_owner)

     with pytest.raises(NotFoundError):
          _record(service, owner, foreign, ExpenseType.OTHER, "1000", date(2026, 1, 1))

     expense = _record(service, other_owner, foreign, ExpenseType.OTHER, "1000", date(2026, 1, 1))
     assert service.list_expenses(owner.id) == []
     with pytest.raises(NotFoundError):
          service.delete_expense(owner.id, expense.id)


def test_update_expense_changes_only_given_fields(db, owner, other_owner, make_property):
     service = ExpenseService(db)
     prop = make_property(owner)
     expense = _record(service, owner, prop, ExpenseType.MAINTENANCE, "450000", date(2026, 4, 2))

     updated = service.update_expense(owner.id, expense.id, {"amount": "480000.50", "memo": "boiler", "description": None})

     assert updated.amount == Decimal("480000.50")
     assert updated.memo == "boiler"
     assert updated.expense_type == ExpenseType.MAINTENANCE
     assert updated.expense_date == date(2026, 4, 2)

     foreign = _record(service, other_owner, make_property(other_owner), ExpenseType.OTHER, "1000", date(2026, 1, 1))
     with pytest.raises(NotFoundError):
          service.update_expense(owner.id, foreign.id, {"amount": "1"})
