# routers/rent_payments.py
"""
Rent payment API routes.

Batch schedule generation, overdue detection (which also reclassifies
PENDING rows as OVERDUE) and per-row maintenance. Every route is scoped to
the authenticated owner; rows of other owners answer 404.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_owner_id
from models import PaymentStatus
from schemas.rent_payment import (
     RentPaymentCreate,
     RentPaymentUpdate,
     RentPaymentStatusUpdate,
     RentPaymentResponse,
     RentScheduleRequest,
     RentScheduleResponse,
)
from services import OverdueService, RentScheduleService

router = APIRouter(prefix="/api/rent-payments", tags=["rent-payments"])


@router.get("", response_model=List[RentPaymentResponse], summary="List rent payments")
def list_rent_payments(
     lease_id: Optional[int] = Query(None, description="Filter by lease ID"),
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     year: Optional[int] = Query(None, description="Filter by payment year"),
     month: Optional[int] = Query(None, ge=1, le=12, description="Filter by payment month"),
     status: Optional[PaymentStatus] = Query(None, description="Filter by rent status"),
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return RentScheduleService(db).list_payments(
          owner_id, lease_id=lease_id, property_id=property_id, year=year, month=month, status=status
     )


@router.post(
     "/generate",
     response_model=RentScheduleResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Generate monthly payment rows for a lease",
)
def generate_rent_schedule(
     body: RentScheduleRequest,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """
     Ensure one payment row per month in the inclusive range.

     Months that already have a row are left untouched, so the call can be
     retried safely. **count** is the number of months in the range.
     """
     count = RentScheduleService(db).generate(
          owner_id,
          body.lease_id,
          body.start_year,
          body.start_month,
          body.end_year,
          body.end_month,
     )
     db.commit()
     return RentScheduleResponse(message=f"{count} rent payments generated", count=count)


@router.get(
     "/overdue/list",
     response_model=List[RentPaymentResponse],
     summary="List overdue payments",
)
def list_overdue_payments(
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """
     Unpaid payments past their due date, oldest first.

     PENDING rows in the result are switched to OVERDUE as part of this call.
     """
     payments = OverdueService(db).list_overdue(owner_id)
     db.commit()
     return payments


@router.post(
     "",
     response_model=RentPaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a rent payment",
)
def create_rent_payment(
     body: RentPaymentCreate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     payment = RentScheduleService(db).create_payment(owner_id, **body.model_dump())
     db.commit()
     db.refresh(payment)
     return payment


@router.get("/{payment_id}", response_model=RentPaymentResponse, summary="Get rent payment by ID")
def get_rent_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     return RentScheduleService(db).get_payment(owner_id, payment_id)


@router.put("/{payment_id}", response_model=RentPaymentResponse, summary="Update rent payment")
def update_rent_payment(
     payment_id: int,
     body: RentPaymentUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     payment = RentScheduleService(db).update_payment(owner_id, payment_id, body.model_dump(exclude_unset=True))
     db.commit()
     db.refresh(payment)
     return payment


@router.patch(
     "/{payment_id}/status",
     response_model=RentPaymentResponse,
     summary="Change payment status",
)
def update_rent_payment_status(
     payment_id: int,
     body: RentPaymentStatusUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     """Set rent / management-fee status. payment_date defaults to now."""
     payment = RentScheduleService(db).update_status(
          owner_id,
          payment_id,
          rent_status=body.rent_status,
          management_fee_status=body.management_fee_status,
          payment_date=body.payment_date,
     )
     db.commit()
     db.refresh(payment)
     return payment


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete rent payment")
def delete_rent_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     RentScheduleService(db).delete_payment(owner_id, payment_id)
     db.commit()
     return None
