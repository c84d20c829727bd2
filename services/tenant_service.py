# services/tenant_service.py
"""
Tenant Service - tenants as seen through an owner's leases.
"""
from typing import List

from sqlalchemy.orm import Session

from errors import InvalidStateError
from models import Lease, LeaseStatus, Tenant
from services import access


class TenantService:

     def __init__(self, db: Session):
          self.db = db

     def create_tenant(self, data: dict) -> Tenant:
          tenant = Tenant(**data)
          self.db.add(tenant)
          self.db.flush()
          return tenant

     def list_tenants(self, owner_id: int) -> List[Tenant]:
          return access.visible_tenants(self.db, owner_id).order_by(Tenant.name.asc()).all()

     def get_tenant(self, owner_id: int, tenant_id: int) -> Tenant:
          return access.get_visible_tenant(self.db, owner_id, tenant_id)

     def update_tenant(self, owner_id: int, tenant_id: int, changes: dict) -> Tenant:
          tenant = access.get_visible_tenant(self.db, owner_id, tenant_id)
          for field, value in changes.items():
               if value is not None:
                    setattr(tenant, field, value)
          self.db.flush()
          return tenant

     def delete_tenant(self, owner_id: int, tenant_id: int) -> None:
          """
          Delete a tenant with no ACTIVE lease.

          Ended leases stay in place with their tenant reference cleared, so
          payment history survives the tenant.

          Raises:
               NotFoundError: If the tenant has no lease on the owner's properties.
               InvalidStateError: If any linked lease is still ACTIVE.
          """
          tenant = access.get_visible_tenant(self.db, owner_id, tenant_id)

          active = (
               self.db.query(Lease)
               .filter(Lease.tenant_id == tenant.id, Lease.status == LeaseStatus.ACTIVE)
               .count()
          )
          if active:
               raise InvalidStateError(
                    f"Tenant with ID {tenant_id} still has {active} active lease(s)"
               )

          self.db.delete(tenant)
          self.db.flush()
