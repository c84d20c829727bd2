# tests/test_property_summary.py
from datetime import date, datetime
from decimal import Decimal

import pytest

from errors import NotFoundError
from models import Expense, ExpenseType, LeaseStatus, PaymentStatus, RentPayment
from services import PropertyService, RentScheduleService

NOW = datetime(2026, 10, 17)


def _payment(db, lease, year, month, status):
     row = RentScheduleService._candidate(lease, year, month)
     row["rent_status"] = status
     db.add(RentPayment(**row))
     db.flush()


def _expense(db, prop, amount, on):
     db.add(Expense(property_id=prop.id, expense_type=ExpenseType.MAINTENANCE, amount=Decimal(amount), expense_date=on))
     db.flush()


def test_summary_counts_collected_rent_for_current_year(db, owner, make_property, make_lease):
     prop = make_property(
          owner, acquisition_cost=Decimal("10000000"), loan_amount=Decimal("100000000"),
          loan_interest_rate=Decimal("4"),
     )
     lease = make_lease(prop)
     make_lease(prop, monthly_rent=Decimal("500000"), status=LeaseStatus.TERMINATED)
     _payment(db, lease, 2026, 1, PaymentStatus.PAID)
     _payment(db, lease, 2026, 2, PaymentStatus.PAID)
     _payment(db, lease, 2026, 3, PaymentStatus.PENDING)
     _payment(db, lease, 2025, 12, PaymentStatus.PAID)
     _expense(db, prop, "300000", date(2026, 5, 1))
     _expense(db, prop, "999000", date(2025, 5, 1))

     summary = PropertyService(db).summary(owner.id, prop.id, now=NOW)

     assert summary["property"] == {"id": prop.id, "name": prop.name, "status": prop.status}
     assert summary["current_year"] == 2026
     assert summary["monthly_rent_total"] == Decimal("1000000")
     assert summary["annual_rent"] == Decimal("2000000")
     assert summary["annual_expense"] == Decimal("300000")
     # loan interest is not part of the realised net income
     assert summary["net_income"] == Decimal("1700000")
     # deposits are not subtracted from the investment
     assert summary["total_investment"] == Decimal("110000000")
     assert summary["yields"] == {
          "gross_yield": Decimal("1.00"),
          "net_yield": Decimal("0.85"),
          "cash_on_cash": Decimal("1.55"),
     }


def test_summary_cash_on_cash_is_zero_without_equity(db, owner, make_property, make_lease):
     prop = make_property(owner, loan_amount=Decimal("200000000"))
     lease = make_lease(prop)
     _payment(db, lease, 2026, 1, PaymentStatus.PAID)

     summary = PropertyService(db).summary(owner.id, prop.id, now=NOW)

     assert summary["total_investment"] == Decimal("0")
     assert summary["yields"]["cash_on_cash"] == Decimal("0.00")
     assert summary["yields"]["gross_yield"] == Decimal("0.50")


def test_summary_of_other_owners_property_is_not_found(db, owner, other_owner, make_property):
     foreign = make_property(other_owner)

     with pytest.raises(NotFoundError):
          PropertyService(db).summary(owner.id, foreign.id, now=NOW)
