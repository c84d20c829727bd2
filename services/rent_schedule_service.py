# services/rent_schedule_service.py
"""
Rent Schedule Service - monthly payment obligations for leases.

Batch generation writes one RentPayment per calendar month of a range and
is idempotent: months that already have a row for the lease are left exactly
as they are, and only missing months are inserted. The uniqueness constraint
on (lease_id, payment_year, payment_month) resolves concurrent generators;
no application-level locking is involved.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Lease, Property, RentPayment, PaymentStatus, PaymentMethod
from services import access
from services.money import due_date_for, iter_months, to_decimal

logger = logging.getLogger(__name__)

UPSERT_KEY = ["lease_id", "payment_year", "payment_month"]

# Dialects with INSERT ... ON CONFLICT DO NOTHING
NATIVE_UPSERT = {
     "sqlite": sqlite_insert,
     "postgresql": postgresql_insert,
}


class RentScheduleService:
     """Generates and maintains RentPayment rows for an owner's leases."""

     def __init__(self, db: Session):
          self.db = db

     # ------------------------------------------------------------------
     # Batch generation
     # ------------------------------------------------------------------

     def generate(
          self,
          owner_id: int,
          lease_id: int,
          start_year: int,
          start_month: int,
          end_year: int,
          end_month: int,
     ) -> int:
          """
          Ensure a payment row exists for every month of an inclusive range.

          Amounts come from the lease's current terms. Existing rows keep
          their amounts, statuses and payment dates.

          Returns:
               Number of months in the range (rows considered, not rows inserted).

          Raises:
               NotFoundError: If the lease is not on one of the owner's properties.
          """
          lease = access.get_owned_lease(self.db, owner_id, lease_id)

          rows = [
               self._candidate(lease, year, month)
               for year, month in iter_months(start_year, start_month, end_year, end_month)
          ]
          if not rows:
               return 0

          inserted = self._insert_missing(lease.id, rows)
          # Rows were written outside the ORM; reload the collection on next access
          self.db.expire(lease, ["rent_payments"])
          logger.info(
               "Rent schedule for lease %s: %d months considered, %d inserted",
               lease.id, len(rows), inserted,
          )
          return len(rows)

     @staticmethod
     def _candidate(lease: Lease, year: int, month: int) -> dict:
          rent = to_decimal(lease.monthly_rent)
          fee = to_decimal(lease.management_fee)
          return {
               "lease_id": lease.id,
               "payment_year": year,
               "payment_month": month,
               "due_date": due_date_for(year, month, lease.rent_due_day),
               "payment_date": None,
               "rent_amount": rent,
               "management_fee_amount": fee,
               "total_amount": rent + fee,
               "payment_method": PaymentMethod.TRANSFER,
               "rent_status": PaymentStatus.PENDING,
               "management_fee_status": PaymentStatus.PENDING,
          }

     def _insert_missing(self, lease_id: int, rows: List[dict]) -> int:
          """Insert rows whose (lease, year, month) key is free; return how many were written."""
          insert = NATIVE_UPSERT.get(self.db.get_bind().dialect.name)
          if insert is None:
               return self._insert_missing_portable(lease_id, rows)

          stmt = insert(RentPayment).values(rows).on_conflict_do_nothing(index_elements=UPSERT_KEY)
          result = self.db.execute(stmt)
          return max(result.rowcount, 0)

     def _insert_missing_portable(self, lease_id: int, rows: List[dict]) -> int:
          # Dialects without ON CONFLICT: one savepoint per row. A key taken by
          # a concurrent generator after the existence check is skipped.
          existing = {
               (year, month)
               for year, month in self.db.query(RentPayment.payment_year, RentPayment.payment_month)
               .filter(RentPayment.lease_id == lease_id)
               .all()
          }

          inserted = 0
          for row in rows:
               if (row["payment_year"], row["payment_month"]) in existing:
                    continue
               try:
                    with self.db.begin_nested():
                         self.db.add(RentPayment(**row))
               except IntegrityError:
                    logger.info(
                         "Rent payment %s-%02d for lease %s already exists, skipped",
                         row["payment_year"], row["payment_month"], lease_id,
                    )
                    continue
               inserted += 1
          return inserted

     # ------------------------------------------------------------------
     # Single-record operations
     # ------------------------------------------------------------------

     def create_payment(
          self,
          owner_id: int,
          lease_id: int,
          payment_year: int,
          payment_month: int,
          due_date,
          rent_amount: Decimal,
          management_fee_amount: Optional[Decimal] = None,
          payment_date: Optional[datetime] = None,
          payment_method: PaymentMethod = PaymentMethod.TRANSFER,
          rent_status: Optional[PaymentStatus] = None,
          management_fee_status: Optional[PaymentStatus] = None,
          memo: Optional[str] = None,
     ) -> RentPayment:
          """Record one payment row for an owned lease."""
          lease = access.get_owned_lease(self.db, owner_id, lease_id)

          payment = RentPayment(
               lease_id=lease.id,
               payment_year=payment_year,
               payment_month=payment_month,
               due_date=due_date,
               payment_date=payment_date,
               rent_amount=to_decimal(rent_amount),
               management_fee_amount=to_decimal(management_fee_amount),
               payment_method=payment_method,
               rent_status=rent_status or PaymentStatus.PENDING,
               management_fee_status=management_fee_status or PaymentStatus.PENDING,
               memo=memo,
          )
          payment.recompute_total()

          self.db.add(payment)
          self.db.flush()
          return payment

     def update_payment(self, owner_id: int, payment_id: int, changes: dict) -> RentPayment:
          """
          Apply a partial edit. total_amount is recomputed from the resulting
          rent and management-fee amounts.
          """
          payment = access.get_owned_payment(self.db, owner_id, payment_id)

          for field, value in changes.items():
               if value is None:
                    continue
               if field in ("rent_amount", "management_fee_amount"):
                    value = to_decimal(value)
               setattr(payment, field, value)

          payment.recompute_total()
          self.db.flush()
          return payment

     def update_status(
          self,
          owner_id: int,
          payment_id: int,
          rent_status: Optional[PaymentStatus] = None,
          management_fee_status: Optional[PaymentStatus] = None,
          payment_date: Optional[datetime] = None,
     ) -> RentPayment:
          """Set payment statuses; the payment date defaults to now."""
          payment = access.get_owned_payment(self.db, owner_id, payment_id)

          if rent_status is not None:
               payment.rent_status = rent_status
          if management_fee_status is not None:
               payment.management_fee_status = management_fee_status
          payment.payment_date = payment_date or datetime.now()

          self.db.flush()
          return payment

     def list_payments(
          self,
          owner_id: int,
          lease_id: Optional[int] = None,
          property_id: Optional[int] = None,
          year: Optional[int] = None,
          month: Optional[int] = None,
          status: Optional[PaymentStatus] = None,
     ) -> List[RentPayment]:
          query = access.owned_payments(self.db, owner_id)

          if lease_id:
               query = query.filter(RentPayment.lease_id == lease_id)
          if property_id:
               query = query.filter(Property.id == property_id)
          if year:
               query = query.filter(RentPayment.payment_year == year)
          if month:
               query = query.filter(RentPayment.payment_month == month)
          if status:
               query = query.filter(RentPayment.rent_status == status)

          return query.order_by(
               RentPayment.payment_year.desc(), RentPayment.payment_month.desc()
          ).all()

     def get_payment(self, owner_id: int, payment_id: int) -> RentPayment:
          return access.get_owned_payment(self.db, owner_id, payment_id)

     def delete_payment(self, owner_id: int, payment_id: int) -> None:
          payment = access.get_owned_payment(self.db, owner_id, payment_id)
          self.db.delete(payment)
          self.db.flush()
