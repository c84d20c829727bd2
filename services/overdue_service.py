# services/overdue_service.py
"""
Overdue detection for rent payments.

Listing overdue payments also reclassifies them: every PENDING row that is
past due is switched to OVERDUE in the same call. Rows already OVERDUE match
the filter again on later calls but are not rewritten, so repeated calls are
safe. The update is not locked against the read; a row paid in between is
skipped by the ``rent_status == PENDING`` guard on the UPDATE.
"""
import logging
from datetime import datetime, time, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from models import RentPayment, PaymentStatus
from services import access

logger = logging.getLogger(__name__)

UNPAID_STATUSES = (PaymentStatus.PENDING, PaymentStatus.OVERDUE)


def overdue_cutoff(now: datetime):
     """
     First due date that is not yet overdue at ``now``.

     A due date means midnight of that day, so a payment due today is
     overdue as soon as the day has started.
     """
     if now.time() == time.min:
          return now.date()
     return now.date() + timedelta(days=1)


class OverdueService:
     """Finds and reclassifies past-due rent payments across an owner's properties."""

     def __init__(self, db: Session):
          self.db = db

     def list_overdue(self, owner_id: int, now: Optional[datetime] = None) -> List[RentPayment]:
          """
          Return unpaid payments due before ``now``, oldest first.

          Only the rent status is considered and changed; the management-fee
          status is left alone.
          """
          now = now or datetime.now()

          payments = (
               access.owned_payments(self.db, owner_id)
               .filter(
                    RentPayment.due_date < overdue_cutoff(now),
                    RentPayment.rent_status.in_(UNPAID_STATUSES),
               )
               .order_by(RentPayment.due_date.asc(), RentPayment.id.asc())
               .all()
          )

          pending_ids = [p.id for p in payments if p.rent_status == PaymentStatus.PENDING]
          if pending_ids:
               updated = (
                    self.db.query(RentPayment)
                    .filter(
                         RentPayment.id.in_(pending_ids),
                         RentPayment.rent_status == PaymentStatus.PENDING,
                    )
                    .update(
                         {RentPayment.rent_status: PaymentStatus.OVERDUE},
                         synchronize_session="fetch",
                    )
               )
               logger.info("Marked %d rent payments overdue for owner %s", updated, owner_id)

          return payments
