# tests/test_valuation.py
from datetime import date, datetime
from decimal import Decimal

import pytest

from errors import NotFoundError
from models import Expense, ExpenseType, LeaseStatus, PropertyValuation
from services import ValuationService
from services.valuation_service import sale_price

NOW = datetime(2026, 6, 1, 12, 0)


def _expense(db, prop, amount, on):
     db.add(Expense(property_id=prop.id, expense_type=ExpenseType.MAINTENANCE, amount=Decimal(amount), expense_date=on))
     db.flush()


def test_gross_yield_and_suggested_price(db, owner, make_property, make_lease):
     prop = make_property(owner, purchase_price=Decimal("200000000"))
     make_lease(prop, monthly_rent=Decimal("3800000"), deposit=Decimal("100000000"))

     result = ValuationService(db).calculate(owner.id, prop.id, now=NOW)
     valuation, details = result["valuation"], result["details"]

     assert details["annual_rent"] == Decimal("45600000")
     assert valuation.gross_yield == Decimal("22.80")
     assert valuation.net_yield == Decimal("22.80")
     # investment = 200,000,000 - 100,000,000 deposit
     assert valuation.total_investment == Decimal("100000000")
     assert valuation.cash_on_cash == Decimal("45.60")
     assert valuation.target_yield == Decimal("5.0")
     assert valuation.suggested_price == Decimal("1012000000")
     assert valuation.expected_profit == Decimal("812000000")


def test_sale_price_base_without_rent_is_deposit_only():
     assert sale_price(Decimal("45600000"), Decimal("5"), Decimal("0")) == Decimal("912000000")
     assert sale_price(Decimal("0"), Decimal("5"), Decimal("30000000")) == Decimal("30000000")


def test_only_active_leases_count(db, owner, make_property, make_lease):
     prop = make_property(owner)
     make_lease(prop, monthly_rent=Decimal("1000000"), deposit=Decimal("5000000"))
     make_lease(prop, monthly_rent=Decimal("9000000"), deposit=Decimal("90000000"), status=LeaseStatus.EXPIRED)

     details = ValuationService(db).calculate(owner.id, prop.id, now=NOW)["details"]

     assert details["monthly_rent"] == Decimal("1000000")
     assert details["total_deposit"] == Decimal("5000000")


def test_expenses_outside_current_year_are_ignored(db, owner, make_property, make_lease):
     prop = make_property(owner, loan_amount=Decimal("100000000"), loan_interest_rate=Decimal("4.5"))
     make_lease(prop, monthly_rent=Decimal("2000000"), deposit=Decimal("0"))
     _expense(db, prop, "1000000", date(2026, 3, 1))
     _expense(db, prop, "5000000", date(2025, 12, 31))
     _expense(db, prop, "7000000", date(2027, 1, 1))

     result = ValuationService(db).calculate(owner.id, prop.id, now=NOW)
     details = result["details"]

     assert details["annual_expense"] == Decimal("1000000")
     assert details["loan_interest"] == Decimal("4500000")
     assert details["total_annual_expense"] == Decimal("5500000")
     assert details["net_income"] == Decimal("18500000")
     assert result["valuation"].annual_expense == Decimal("5500000")
     # 18,500,000 / 200,000,000
     assert result["valuation"].net_yield == Decimal("9.25")


def test_cash_on_cash_is_zero_when_investment_not_positive(db, owner, make_property, make_lease):
     prop = make_property(owner, loan_amount=Decimal("150000000"))
     make_lease(prop, monthly_rent=Decimal("1000000"), deposit=Decimal("100000000"))

     valuation = ValuationService(db).calculate(owner.id, prop.id, now=NOW)["valuation"]

     assert valuation.total_investment == Decimal("-50000000")
     assert valuation.cash_on_cash == Decimal("0")


def test_zero_purchase_price_gives_zero_yields(db, owner, make_property):
     prop = make_property(owner, purchase_price=Decimal("0"))

     valuation = ValuationService(db).calculate(owner.id, prop.id, now=NOW)["valuation"]

     assert valuation.gross_yield == Decimal("0")
     assert valuation.net_yield == Decimal("0")
     assert valuation.suggested_price == Decimal("0")


@pytest.mark.parametrize("target", [None, Decimal("0")])
def test_missing_target_yield_falls_back_to_default(db, owner, make_property, make_lease, target):
     prop = make_property(owner)
     make_lease(prop, monthly_rent=Decimal("1000000"), deposit=Decimal("0"))

     valuation = ValuationService(db).calculate(owner.id, prop.id, target_yield=target, now=NOW)["valuation"]

     assert valuation.target_yield == Decimal("5")
     assert valuation.suggested_price == Decimal("240000000")


def test_custom_target_yield(db, owner, make_property, make_lease):
     prop = make_property(owner)
     make_lease(prop, monthly_rent=Decimal("1000000"), deposit=Decimal("0"))

     valuation = ValuationService(db).calculate(owner.id, prop.id, target_yield=Decimal("6"), now=NOW)["valuation"]

     assert valuation.suggested_price == Decimal("200000000")


def test_each_calculation_stores_a_snapshot(db, owner, other_owner, make_property):
     prop = make_property(owner)
     service = ValuationService(db)
     service.calculate(owner.id, prop.id, now=NOW)
     service.calculate(owner.id, prop.id, memo="second", now=datetime(2026, 6, 2))

     stored = service.list_valuations(owner.id)
     assert len(stored) == 2
     assert stored[0].memo == "second"
     assert service.list_valuations(other_owner.id) == []

     with pytest.raises(NotFoundError):
          service.get_valuation(other_owner.id, stored[0].id)
     service.delete_valuation(owner.id, stored[0].id)
     assert db.query(PropertyValuation).count() == 1


def test_calculate_rejects_other_owners_property(db, owner, other_owner, make_property):
     prop = make_property(other_owner)

     with pytest.raises(NotFoundError):
          ValuationService(db).calculate(owner.id, prop.id, now=NOW)
     assert db.query(PropertyValuation).count() == 0


def test_large_cash_on_cash_fits_yield_columns(db, owner, make_property, make_lease):
     # Investment of 1 after the loan makes cash-on-cash enormous
     prop = make_property(owner, loan_amount=Decimal("199999999"))
     make_lease(prop, monthly_rent=Decimal("1000000"), deposit=Decimal("0"))

     valuation = ValuationService(db).calculate(owner.id, prop.id, now=NOW)["valuation"]
     db.expire(valuation)

     assert valuation.total_investment == Decimal("1")
     assert valuation.cash_on_cash == Decimal("1200000000.00")
     for column in ("gross_yield", "net_yield", "cash_on_cash"):
          numeric = PropertyValuation.__table__.c[column].type
          integer_digits = numeric.precision - numeric.scale
          assert integer_digits >= len(str(int(valuation.cash_on_cash)))
