# routers/properties.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from models import PropertyStatus, PropertyType
from schemas.property import PropertyCreate, PropertyResponse, PropertySummaryResponse, PropertyUpdate
from services import PropertyService

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("", response_model=List[PropertyResponse], summary="List my properties")
def list_properties(
     status: Optional[PropertyStatus] = Query(None, description="Filter by status"),
     property_type: Optional[PropertyType] = Query(None, description="Filter by type"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return PropertyService(db).list_properties(owner_id, status=status, property_type=property_type)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED, summary="Register a property")
def create_property(
     body: PropertyCreate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     prop = PropertyService(db).create_property(owner_id, body.model_dump())
     db.commit()
     db.refresh(prop)
     return prop


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property by ID")
def get_property(
     property_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return PropertyService(db).get_property(owner_id, property_id)


@router.get("/{property_id}/summary", response_model=PropertySummaryResponse, summary="Property summary for the current year")
def get_property_summary(
     property_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return PropertyService(db).summary(owner_id, property_id)


@router.put("/{property_id}", response_model=PropertyResponse, summary="Update property")
def update_property(
     property_id: int,
     body: PropertyUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     prop = PropertyService(db).update_property(owner_id, property_id, body.model_dump(exclude_unset=True))
     db.commit()
     db.refresh(prop)
     return prop


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete property")
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """
     Delete a property with its leases, rent payments, expenses and
     valuations in a single transaction.
     """
     PropertyService(db).delete_property(owner_id, property_id)
     db.commit()
     return None
