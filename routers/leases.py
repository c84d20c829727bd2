# routers/leases.py
"""
Lease API routes.

Ending the last ACTIVE lease on a property (EXPIRED / TERMINATED) flips the
property to VACANT; renewal expires the old lease and returns its successor.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from models import LeaseStatus
from schemas.lease import LeaseCreate, LeaseRenew, LeaseResponse, LeaseStatusUpdate, LeaseUpdate
from services import LeaseService

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.get("", response_model=List[LeaseResponse], summary="List leases")
def list_leases(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     status: Optional[LeaseStatus] = Query(None, description="Filter by status"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return LeaseService(db).list_leases(owner_id, property_id=property_id, status=status)


@router.post("", response_model=LeaseResponse, status_code=status.HTTP_201_CREATED, summary="Create a lease")
def create_lease(
     body: LeaseCreate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     lease = LeaseService(db).create_lease(owner_id, **body.model_dump())
     db.commit()
     db.refresh(lease)
     return lease


@router.get("/{lease_id}", response_model=LeaseResponse, summary="Get lease by ID")
def get_lease(
     lease_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return LeaseService(db).get_lease(owner_id, lease_id)


@router.put("/{lease_id}", response_model=LeaseResponse, summary="Update lease terms")
def update_lease(
     lease_id: int,
     body: LeaseUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     lease = LeaseService(db).update_lease(owner_id, lease_id, body.model_dump(exclude_unset=True))
     db.commit()
     db.refresh(lease)
     return lease


@router.patch("/{lease_id}/status", response_model=LeaseResponse, summary="Change lease status")
def change_lease_status(
     lease_id: int,
     body: LeaseStatusUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     lease = LeaseService(db).change_status(owner_id, lease_id, body.status)
     db.commit()
     db.refresh(lease)
     return lease


@router.post(
     "/{lease_id}/renew",
     response_model=LeaseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Renew a lease",
)
def renew_lease(
     lease_id: int,
     body: LeaseRenew,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     lease = LeaseService(db).renew_lease(owner_id, lease_id, **body.model_dump())
     db.commit()
     db.refresh(lease)
     return lease


@router.delete("/{lease_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete lease")
def delete_lease(
     lease_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """Delete a lease and all of its rent payments."""
     LeaseService(db).delete_lease(owner_id, lease_id)
     db.commit()
     return None
