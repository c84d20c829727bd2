# services/lease_service.py
"""
Lease Service - lease lifecycle and its effect on property occupancy.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from errors import NotFoundError
from models import Lease, LeaseStatus, LeaseType, PropertyStatus, Tenant
from services import access
from services.money import to_decimal

logger = logging.getLogger(__name__)

ENDED_STATUSES = (LeaseStatus.EXPIRED, LeaseStatus.TERMINATED)

RENEWAL_COPIED_FIELDS = ("floor", "area_pyeong", "lease_type", "has_vat")
RENEWAL_TERM_FIELDS = ("deposit", "monthly_rent", "management_fee", "rent_due_day")


def on_lease_status_changed(
     lease: Lease,
     new_status: LeaseStatus,
     other_active_leases: int,
) -> Optional[PropertyStatus]:
     """
     Property status implied by a lease status change, or None for no change.

     Ending the last ACTIVE lease on a property leaves it VACANT.
     """
     if new_status in ENDED_STATUSES and other_active_leases == 0:
          return PropertyStatus.VACANT
     return None


class LeaseService:

     def __init__(self, db: Session):
          self.db = db

     def create_lease(
          self,
          owner_id: int,
          property_id: int,
          tenant_id: int,
          lease_type: LeaseType,
          start_date: date,
          end_date: date,
          deposit=0,
          monthly_rent=0,
          management_fee=0,
          has_vat: bool = False,
          rent_due_day: Optional[int] = None,
          floor: Optional[str] = None,
          area_pyeong=None,
          memo: Optional[str] = None,
     ) -> Lease:
          """Create an ACTIVE lease and mark the property OCCUPIED."""
          prop = access.get_owned_property(self.db, owner_id, property_id)
          tenant = self.db.get(Tenant, tenant_id)
          if tenant is None:
               raise NotFoundError("Tenant", tenant_id)

          lease = Lease(
               property_id=prop.id,
               tenant_id=tenant.id,
               floor=floor,
               area_pyeong=area_pyeong,
               lease_type=lease_type,
               deposit=to_decimal(deposit),
               monthly_rent=to_decimal(monthly_rent),
               management_fee=to_decimal(management_fee),
               has_vat=has_vat,
               start_date=start_date,
               end_date=end_date,
               rent_due_day=rent_due_day or 1,
               status=LeaseStatus.ACTIVE,
               memo=memo,
          )
          self.db.add(lease)
          prop.status = PropertyStatus.OCCUPIED
          self.db.flush()
          return lease

     def list_leases(
          self,
          owner_id: int,
          property_id: Optional[int] = None,
          status: Optional[LeaseStatus] = None,
     ) -> List[Lease]:
          query = access.owned_leases(self.db, owner_id)
          if property_id:
               query = query.filter(Lease.property_id == property_id)
          if status:
               query = query.filter(Lease.status == status)
          return query.order_by(Lease.start_date.desc()).all()

     def get_lease(self, owner_id: int, lease_id: int) -> Lease:
          return access.get_owned_lease(self.db, owner_id, lease_id)

     def update_lease(self, owner_id: int, lease_id: int, changes: dict) -> Lease:
          """
          Edit lease terms in place. Payments already generated keep the
          amounts they were created with.
          """
          lease = access.get_owned_lease(self.db, owner_id, lease_id)
          for field, value in changes.items():
               if value is not None:
                    setattr(lease, field, value)
          self.db.flush()
          return lease

     def change_status(self, owner_id: int, lease_id: int, new_status: LeaseStatus) -> Lease:
          """Write the lease status, then apply any implied property status in the same session."""
          lease = access.get_owned_lease(self.db, owner_id, lease_id)
          lease.status = new_status
          self.db.flush()

          other_active = (
               self.db.query(Lease)
               .filter(
                    Lease.property_id == lease.property_id,
                    Lease.status == LeaseStatus.ACTIVE,
                    Lease.id != lease.id,
               )
               .count()
          )
          property_status = on_lease_status_changed(lease, new_status, other_active)
          if property_status is not None:
               lease.property.status = property_status
               logger.info("Property %s is now %s", lease.property_id, property_status.value)
               self.db.flush()

          return lease

     def renew_lease(
          self,
          owner_id: int,
          lease_id: int,
          start_date: date,
          end_date: date,
          **overrides,
     ) -> Lease:
          """
          Expire a lease and create its successor.

          The new lease copies floor, area, type and VAT flag, and takes
          deposit, rent, management fee and due day from ``overrides`` when
          given, else from the old lease. Payment history stays with the old
          lease.
          """
          existing = access.get_owned_lease(self.db, owner_id, lease_id)
          existing.status = LeaseStatus.EXPIRED

          values = {field: getattr(existing, field) for field in RENEWAL_COPIED_FIELDS}
          for field in RENEWAL_TERM_FIELDS:
               override = overrides.get(field)
               values[field] = override if override is not None else getattr(existing, field)

          renewed = Lease(
               property_id=existing.property_id,
               tenant_id=existing.tenant_id,
               start_date=start_date,
               end_date=end_date,
               status=LeaseStatus.ACTIVE,
               **values,
          )
          self.db.add(renewed)
          self.db.flush()
          logger.info("Lease %s renewed as lease %s", existing.id, renewed.id)
          return renewed

     def delete_lease(self, owner_id: int, lease_id: int) -> None:
          """Delete a lease together with its rent payments."""
          lease = access.get_owned_lease(self.db, owner_id, lease_id)
          self.db.delete(lease)
          self.db.flush()
