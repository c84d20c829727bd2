# services/property_service.py
"""
Property Service - owner-scoped property records.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Lease, LeaseStatus, PaymentStatus, Property, PropertyStatus, PropertyType, RentPayment
from services import access
from services.money import percent_of, round_percent, to_decimal
from services.valuation_service import annual_expense_total

logger = logging.getLogger(__name__)


class PropertyService:

     def __init__(self, db: Session):
          self.db = db

     def create_property(self, owner_id: int, data: dict) -> Property:
          prop = Property(owner_id=owner_id, **data)
          for field in ("purchase_price", "acquisition_cost", "loan_amount", "loan_interest_rate"):
               setattr(prop, field, to_decimal(getattr(prop, field)))
          if prop.status is None:
               prop.status = PropertyStatus.VACANT
          self.db.add(prop)
          self.db.flush()
          return prop

     def list_properties(
          self,
          owner_id: int,
          status: Optional[PropertyStatus] = None,
          property_type: Optional[PropertyType] = None,
     ) -> List[Property]:
          query = self.db.query(Property).filter(Property.owner_id == owner_id)
          if status:
               query = query.filter(Property.status == status)
          if property_type:
               query = query.filter(Property.property_type == property_type)
          return query.order_by(Property.created_at.desc(), Property.id.desc()).all()

     def get_property(self, owner_id: int, property_id: int) -> Property:
          return access.get_owned_property(self.db, owner_id, property_id)

     def update_property(self, owner_id: int, property_id: int, changes: dict) -> Property:
          prop = access.get_owned_property(self.db, owner_id, property_id)
          for field, value in changes.items():
               if value is not None:
                    setattr(prop, field, value)
          self.db.flush()
          return prop

     def delete_property(self, owner_id: int, property_id: int) -> None:
          """
          Delete a property with its leases, their rent payments, its expenses
          and its valuations.

          Everything is removed in one flush; the caller's transaction decides
          whether all of it lands or none of it does.
          """
          prop = access.get_owned_property(self.db, owner_id, property_id)
          self.db.delete(prop)
          self.db.flush()
          logger.info("Deleted property %s for owner %s", property_id, owner_id)

     def summary(self, owner_id: int, property_id: int, now: Optional[datetime] = None) -> dict:
          """
          Realised figures for one property over now's calendar year.

          Unlike a valuation, rent here is what was actually collected (rent
          of PAID payments for the year), expenses exclude loan interest and
          the investment does not subtract deposits. Nothing is stored.
          """
          prop = access.get_owned_property(self.db, owner_id, property_id)
          now = now or datetime.now()

          collected = (
               self.db.query(func.coalesce(func.sum(RentPayment.rent_amount), 0))
               .join(Lease, RentPayment.lease_id == Lease.id)
               .filter(
                    Lease.property_id == prop.id,
                    RentPayment.payment_year == now.year,
                    RentPayment.rent_status == PaymentStatus.PAID,
               )
               .scalar()
          )
          monthly_rent_total = (
               self.db.query(func.coalesce(func.sum(Lease.monthly_rent), 0))
               .filter(Lease.property_id == prop.id, Lease.status == LeaseStatus.ACTIVE)
               .scalar()
          )

          annual_rent = to_decimal(collected)
          annual_expense = annual_expense_total(self.db, [prop.id], now)
          net_income = annual_rent - annual_expense
          purchase_price = to_decimal(prop.purchase_price)
          total_investment = purchase_price + to_decimal(prop.acquisition_cost) - to_decimal(prop.loan_amount)

          return {
               "property": {"id": prop.id, "name": prop.name, "status": prop.status},
               "current_year": now.year,
               "monthly_rent_total": to_decimal(monthly_rent_total),
               "annual_rent": annual_rent,
               "annual_expense": annual_expense,
               "net_income": net_income,
               "total_investment": total_investment,
               "yields": {
                    "gross_yield": round_percent(percent_of(annual_rent, purchase_price)),
                    "net_yield": round_percent(percent_of(net_income, purchase_price)),
                    "cash_on_cash": round_percent(percent_of(net_income, total_investment)),
               },
          }
