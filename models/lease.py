# models/lease.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, Boolean, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class LeaseType(str, enum.Enum):
     JEONSE = "JEONSE"  # deposit only, no periodic rent
     MONTHLY = "MONTHLY"
     HALF_JEONSE = "HALF_JEONSE"


class LeaseStatus(str, enum.Enum):
     ACTIVE = "ACTIVE"
     EXPIRED = "EXPIRED"
     TERMINATED = "TERMINATED"
     PENDING = "PENDING"


class Lease(TimestampMixin, Base):
     """
     Lease model - binds one property to one tenant for [start_date, end_date].

     Renewal creates a new row; the previous lease is marked EXPIRED and
     keeps its payment history.
     """
     __tablename__ = "leases"

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="SET NULL"), nullable=True, index=True)  # cleared when the tenant is deleted

     floor = Column(String(20), nullable=True)
     area_pyeong = Column(Numeric(10, 2), nullable=True)
     lease_type = Column(
          Enum(LeaseType, name="lease_type", create_constraint=True),
          nullable=False,
     )

     # Pricing
     deposit = Column(Numeric(15, 2), default=0, nullable=False)
     monthly_rent = Column(Numeric(15, 2), default=0, nullable=False)
     management_fee = Column(Numeric(15, 2), default=0, nullable=False)
     has_vat = Column(Boolean, default=False, nullable=False)

     # Lease period (inclusive, not checked for start <= end)
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)
     rent_due_day = Column(Integer, default=1, nullable=False)  # not clamped to month length

     status = Column(
          Enum(LeaseStatus, name="lease_status", create_constraint=True),
          default=LeaseStatus.ACTIVE,
          nullable=False,
          index=True,
     )
     memo = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="leases")
     tenant = relationship("Tenant", back_populates="leases")
     rent_payments = relationship("RentPayment", back_populates="lease", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Lease(id={self.id}, tenant_id={self.tenant_id}, property_id={self.property_id})>"
