# models/rent_payment.py
import enum
from sqlalchemy import (
     Column, Integer, Numeric, Date, DateTime, Text, ForeignKey, Enum, UniqueConstraint
)
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class PaymentStatus(str, enum.Enum):
     """Status of the rent or management-fee part of a payment."""
     PAID = "PAID"
     PENDING = "PENDING"
     PARTIAL = "PARTIAL"
     OVERDUE = "OVERDUE"


class PaymentMethod(str, enum.Enum):
     TRANSFER = "TRANSFER"
     CASH = "CASH"
     CARD = "CARD"
     AUTO_TRANSFER = "AUTO_TRANSFER"


class RentPayment(TimestampMixin, Base):
     """
     RentPayment model - one monthly obligation of a lease.

     (lease_id, payment_year, payment_month) is unique; the schedule
     generator relies on it to stay idempotent under concurrent calls.
     ``total_amount`` is written alongside the two component amounts and is
     only correct as of the last write that recomputed it.
     """
     __tablename__ = "rent_payments"
     __table_args__ = (
          UniqueConstraint(
               "lease_id", "payment_year", "payment_month",
               name="uq_rent_payments_lease_year_month",
          ),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     lease_id = Column(
          Integer,
          ForeignKey("leases.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     payment_year = Column(Integer, nullable=False)
     payment_month = Column(Integer, nullable=False)

     due_date = Column(Date, nullable=False, index=True)
     payment_date = Column(DateTime, nullable=True)

     rent_amount = Column(Numeric(15, 2), nullable=False)
     management_fee_amount = Column(Numeric(15, 2), default=0, nullable=False)
     total_amount = Column(Numeric(15, 2), nullable=False)

     payment_method = Column(
          Enum(PaymentMethod, name="payment_method", create_constraint=True),
          default=PaymentMethod.TRANSFER,
          nullable=False,
     )
     rent_status = Column(
          Enum(PaymentStatus, name="rent_status", create_constraint=True),
          default=PaymentStatus.PENDING,
          nullable=False,
          index=True
     )
     management_fee_status = Column(
          Enum(PaymentStatus, name="management_fee_status", create_constraint=True),
          default=PaymentStatus.PENDING,
          nullable=False,
     )
     memo = Column(Text, nullable=True)

     # Relationships
     lease = relationship("Lease", back_populates="rent_payments")

     def __repr__(self):
          return (
               f"<RentPayment(id={self.id}, lease_id={self.lease_id}, "
               f"{self.payment_year}-{self.payment_month:02d}, rent_status='{self.rent_status}')>"
          )

     def recompute_total(self) -> None:
          """Refresh total_amount from the rent and management-fee amounts."""
          self.total_amount = (self.rent_amount or 0) + (self.management_fee_amount or 0)
