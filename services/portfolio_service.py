# services/portfolio_service.py
"""
Portfolio Service - owner-wide rollups, computed fresh on every call.

Rent totals count ACTIVE leases only, while each property's ``lease_count``
counts every lease regardless of status.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from models import LeaseStatus, Property, PropertyStatus
from services.money import ZERO, percent_of, round_percent, to_decimal
from services.valuation_service import annual_expense_total


class PortfolioService:

     def __init__(self, db: Session):
          self.db = db

     def summary(self, owner_id: int, now: Optional[datetime] = None) -> dict:
          properties = (
               self.db.query(Property)
               .options(selectinload(Property.leases))
               .filter(Property.owner_id == owner_id)
               .order_by(Property.id)
               .all()
          )

          total_purchase_price = ZERO
          total_current_value = ZERO
          total_loan_amount = ZERO
          total_monthly_rent = ZERO
          items = []

          for prop in properties:
               monthly_rent = sum(
                    (to_decimal(l.monthly_rent) for l in prop.leases if l.status == LeaseStatus.ACTIVE),
                    ZERO,
               )
               current_value = to_decimal(prop.effective_value)

               total_purchase_price += to_decimal(prop.purchase_price)
               total_current_value += current_value
               total_loan_amount += to_decimal(prop.loan_amount)
               total_monthly_rent += monthly_rent

               items.append({
                    "id": prop.id,
                    "name": prop.name,
                    "status": prop.status,
                    "purchase_price": to_decimal(prop.purchase_price),
                    "current_value": current_value,
                    "monthly_rent": monthly_rent,
                    "lease_count": len(prop.leases),
               })

          total_annual_expense = annual_expense_total(self.db, [p.id for p in properties], now)
          total_annual_rent = total_monthly_rent * 12
          total_net_income = total_annual_rent - total_annual_expense
          total_equity = total_purchase_price - total_loan_amount

          return {
               "total_properties": len(properties),
               "occupied_count": sum(1 for p in properties if p.status == PropertyStatus.OCCUPIED),
               "vacant_count": sum(1 for p in properties if p.status == PropertyStatus.VACANT),
               "financials": {
                    "total_purchase_price": total_purchase_price,
                    "total_current_value": total_current_value,
                    "total_loan_amount": total_loan_amount,
                    "total_equity": total_equity,
                    "total_monthly_rent": total_monthly_rent,
                    "total_annual_rent": total_annual_rent,
                    "total_annual_expense": total_annual_expense,
                    "total_net_income": total_net_income,
               },
               "yields": {
                    "avg_gross_yield": round_percent(percent_of(total_annual_rent, total_purchase_price)),
                    "avg_net_yield": round_percent(percent_of(total_net_income, total_purchase_price)),
                    "avg_cash_on_cash": round_percent(percent_of(total_net_income, total_equity)),
               },
               "properties": items,
          }
