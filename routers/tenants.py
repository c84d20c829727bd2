# routers/tenants.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from services import TenantService

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get("", response_model=List[TenantResponse], summary="List tenants on my properties")
def list_tenants(
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return TenantService(db).list_tenants(owner_id)


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED, summary="Register a tenant")
def create_tenant(
     body: TenantCreate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     tenant = TenantService(db).create_tenant(body.model_dump())
     db.commit()
     db.refresh(tenant)
     return tenant


@router.get("/{tenant_id}", response_model=TenantResponse, summary="Get tenant by ID")
def get_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return TenantService(db).get_tenant(owner_id, tenant_id)


@router.put("/{tenant_id}", response_model=TenantResponse, summary="Update tenant")
def update_tenant(
     tenant_id: int,
     body: TenantUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     tenant = TenantService(db).update_tenant(owner_id, tenant_id, body.model_dump(exclude_unset=True))
     db.commit()
     db.refresh(tenant)
     return tenant


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete tenant")
def delete_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """Refused with 409 while the tenant holds an ACTIVE lease."""
     TenantService(db).delete_tenant(owner_id, tenant_id)
     db.commit()
     return None
