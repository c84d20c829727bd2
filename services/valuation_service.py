# services/valuation_service.py
"""
Valuation Service - yield figures and sale-price simulation for a property.

Formulas (all amounts Decimal):
- monthly rent / deposit: sums over ACTIVE leases only
- annual expense: property expenses dated in the current calendar year
- loan interest: loan_amount * loan_interest_rate / 100, a flat annual figure
  that ignores amortisation and how long the loan was held
- total investment: purchase price + acquisition cost - loan - deposits
  (not clamped; may be zero or negative)
- gross / net yield: over purchase price; cash-on-cash: over total investment;
  each is 0 when its denominator is not positive, then rounded to 2 dp
- suggested price: round(annual rent / target yield) + deposits

Each calculation is stored as a new PropertyValuation row.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from config import DEFAULT_TARGET_YIELD
from models import Expense, Lease, LeaseStatus, Property, PropertyValuation
from services import access
from services.money import (
     HUNDRED, ZERO, percent_of, round_percent, round_whole, to_decimal, year_window,
)

logger = logging.getLogger(__name__)


def annual_expense_total(db: Session, property_ids, now: Optional[datetime] = None) -> Decimal:
     """Sum of expenses for the given properties dated within now's calendar year."""
     start, end = year_window(now)
     total = (
          db.query(func.coalesce(func.sum(Expense.amount), 0))
          .filter(
               Expense.property_id.in_(property_ids),
               Expense.expense_date >= start,
               Expense.expense_date < end,
          )
          .scalar()
     )
     return to_decimal(total)


def sale_price(annual_rent: Decimal, target_yield: Decimal, total_deposit: Decimal) -> Decimal:
     """Price at which annual rent yields ``target_yield`` percent, plus deposits carried over."""
     base_price = round_whole(annual_rent / (target_yield / HUNDRED)) if annual_rent > ZERO else ZERO
     return base_price + total_deposit


class ValuationService:
     """Computes and stores profitability snapshots for an owner's properties."""

     def __init__(self, db: Session):
          self.db = db

     def calculate(
          self,
          owner_id: int,
          property_id: int,
          target_yield: Optional[Decimal] = None,
          memo: Optional[str] = None,
          now: Optional[datetime] = None,
     ) -> dict:
          """
          Compute yields for a property and persist the snapshot.

          Args:
               owner_id: Caller's user id
               property_id: Property to evaluate
               target_yield: Percent yield the sale price should deliver (default 5)
               memo: Free text stored with the snapshot
               now: Calculation time; selects the expense year

          Returns:
               {"valuation": PropertyValuation, "details": dict of intermediate figures}

          Raises:
               NotFoundError: If the property is not owned by the caller.
          """
          prop = access.get_owned_property(self.db, owner_id, property_id)
          now = now or datetime.now()

          active_leases = (
               self.db.query(Lease)
               .filter(Lease.property_id == prop.id, Lease.status == LeaseStatus.ACTIVE)
               .all()
          )

          monthly_rent = sum((to_decimal(l.monthly_rent) for l in active_leases), ZERO)
          annual_rent = monthly_rent * 12
          total_deposit = sum((to_decimal(l.deposit) for l in active_leases), ZERO)

          annual_expense = annual_expense_total(self.db, [prop.id], now)

          purchase_price = to_decimal(prop.purchase_price)
          acquisition_cost = to_decimal(prop.acquisition_cost)
          loan_amount = to_decimal(prop.loan_amount)

          loan_interest = loan_amount * to_decimal(prop.loan_interest_rate) / HUNDRED
          total_annual_expense = annual_expense + loan_interest
          net_income = annual_rent - total_annual_expense
          total_investment = purchase_price + acquisition_cost - loan_amount - total_deposit

          gross_yield = round_percent(percent_of(annual_rent, purchase_price))
          net_yield = round_percent(percent_of(net_income, purchase_price))
          cash_on_cash = round_percent(percent_of(net_income, total_investment))

          # A missing or zero target falls back to the default
          target = to_decimal(target_yield) if target_yield else DEFAULT_TARGET_YIELD
          suggested_price = sale_price(annual_rent, target, total_deposit)
          expected_profit = suggested_price - purchase_price - acquisition_cost

          valuation = PropertyValuation(
               property_id=prop.id,
               annual_rent=annual_rent,
               total_deposit=total_deposit,
               annual_expense=total_annual_expense,
               net_income=net_income,
               total_investment=total_investment,
               gross_yield=gross_yield,
               net_yield=net_yield,
               cash_on_cash=cash_on_cash,
               target_yield=target,
               suggested_price=suggested_price,
               expected_profit=expected_profit,
               memo=memo,
               calculated_at=now,
          )
          self.db.add(valuation)
          self.db.flush()

          logger.info(
               "Valuation %s for property %s: gross %s%%, net %s%%, cash-on-cash %s%%",
               valuation.id, prop.id, gross_yield, net_yield, cash_on_cash,
          )

          details = {
               "monthly_rent": monthly_rent,
               "annual_rent": annual_rent,
               "total_deposit": total_deposit,
               "annual_expense": annual_expense,
               "loan_interest": loan_interest,
               "total_annual_expense": total_annual_expense,
               "net_income": net_income,
               "purchase_price": purchase_price,
               "acquisition_cost": acquisition_cost,
               "loan_amount": loan_amount,
               "total_investment": total_investment,
               "yields": {
                    "gross_yield": gross_yield,
                    "net_yield": net_yield,
                    "cash_on_cash": cash_on_cash,
               },
               "target_yield": target,
               "suggested_price": suggested_price,
               "expected_profit": expected_profit,
          }
          return {"valuation": valuation, "details": details}

     def list_valuations(self, owner_id: int, property_id: Optional[int] = None) -> List[PropertyValuation]:
          query = (
               self.db.query(PropertyValuation)
               .join(Property, PropertyValuation.property_id == Property.id)
               .filter(Property.owner_id == owner_id)
          )
          if property_id:
               query = query.filter(PropertyValuation.property_id == property_id)
          return query.order_by(PropertyValuation.calculated_at.desc(), PropertyValuation.id.desc()).all()

     def get_valuation(self, owner_id: int, valuation_id: int) -> PropertyValuation:
          return access.get_owned_valuation(self.db, owner_id, valuation_id)

     def delete_valuation(self, owner_id: int, valuation_id: int) -> None:
          valuation = access.get_owned_valuation(self.db, owner_id, valuation_id)
          self.db.delete(valuation)
          self.db.flush()
