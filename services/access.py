# services/access.py
"""
Owner-scoped lookups shared by the services.

Every entity is reached through Property.owner_id. A record that exists
but belongs to another owner is reported exactly like a missing one.
"""
from sqlalchemy import exists
from sqlalchemy.orm import Query, Session

from errors import NotFoundError
from models import Expense, Lease, Property, PropertyValuation, RentPayment, Tenant


def owned_leases(db: Session, owner_id: int) -> Query:
     return db.query(Lease).join(Property, Lease.property_id == Property.id).filter(
          Property.owner_id == owner_id
     )


def owned_payments(db: Session, owner_id: int) -> Query:
     return (
          db.query(RentPayment)
          .join(Lease, RentPayment.lease_id == Lease.id)
          .join(Property, Lease.property_id == Property.id)
          .filter(Property.owner_id == owner_id)
     )


def visible_tenants(db: Session, owner_id: int) -> Query:
     """Tenants holding at least one lease on one of the owner's properties."""
     linked = (
          exists()
          .where(Lease.tenant_id == Tenant.id)
          .where(Lease.property_id == Property.id)
          .where(Property.owner_id == owner_id)
     )
     return db.query(Tenant).filter(linked)


def get_owned_property(db: Session, owner_id: int, property_id: int) -> Property:
     prop = (
          db.query(Property)
          .filter(Property.id == property_id, Property.owner_id == owner_id)
          .first()
     )
     if prop is None:
          raise NotFoundError("Property", property_id)
     return prop


def get_owned_lease(db: Session, owner_id: int, lease_id: int) -> Lease:
     lease = owned_leases(db, owner_id).filter(Lease.id == lease_id).first()
     if lease is None:
          raise NotFoundError("Lease", lease_id)
     return lease


def get_owned_payment(db: Session, owner_id: int, payment_id: int) -> RentPayment:
     payment = owned_payments(db, owner_id).filter(RentPayment.id == payment_id).first()
     if payment is None:
          raise NotFoundError("Rent payment", payment_id)
     return payment


def get_visible_tenant(db: Session, owner_id: int, tenant_id: int) -> Tenant:
     tenant = visible_tenants(db, owner_id).filter(Tenant.id == tenant_id).first()
     if tenant is None:
          raise NotFoundError("Tenant", tenant_id)
     return tenant


def get_owned_expense(db: Session, owner_id: int, expense_id: int) -> Expense:
     expense = (
          db.query(Expense)
          .join(Property, Expense.property_id == Property.id)
          .filter(Expense.id == expense_id, Property.owner_id == owner_id)
          .first()
     )
     if expense is None:
          raise NotFoundError("Expense", expense_id)
     return expense


def get_owned_valuation(db: Session, owner_id: int, valuation_id: int) -> PropertyValuation:
     valuation = (
          db.query(PropertyValuation)
          .join(Property, PropertyValuation.property_id == Property.id)
          .filter(PropertyValuation.id == valuation_id, Property.owner_id == owner_id)
          .first()
     )
     if valuation is None:
          raise NotFoundError("Valuation", valuation_id)
     return valuation
