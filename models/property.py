# models/property.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class PropertyType(str, enum.Enum):
     APARTMENT = "APARTMENT"
     OFFICETEL = "OFFICETEL"
     VILLA = "VILLA"
     STUDIO = "STUDIO"
     COMMERCIAL = "COMMERCIAL"
     OFFICE = "OFFICE"
     BUILDING = "BUILDING"
     LAND = "LAND"
     OTHER = "OTHER"


class PropertyStatus(str, enum.Enum):
     """Occupancy status of a property."""
     OCCUPIED = "OCCUPIED"
     VACANT = "VACANT"
     MAINTENANCE = "MAINTENANCE"
     FOR_SALE = "FOR_SALE"


class Property(TimestampMixin, Base):
     """
     Property model - a single real-estate holding in an owner's portfolio.

     Acquisition figures (purchase price, acquisition cost, loan) feed the
     valuation engine. ``loan_amount`` is not checked against the purchase
     price plus costs.
     """
     __tablename__ = "properties"

     id = Column(Integer, primary_key=True, autoincrement=True)
     owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     name = Column(String(255), nullable=False)
     property_type = Column(
          Enum(PropertyType, name="property_type", create_constraint=True),
          default=PropertyType.APARTMENT,
          nullable=False,
     )
     address = Column(String(500), nullable=False)
     address_detail = Column(String(255), nullable=True)
     area = Column(Numeric(10, 2), nullable=True)

     # Acquisition
     purchase_price = Column(Numeric(15, 2), nullable=False)
     purchase_date = Column(Date, nullable=False)
     acquisition_cost = Column(Numeric(15, 2), default=0, nullable=False)
     loan_amount = Column(Numeric(15, 2), default=0, nullable=False)
     loan_interest_rate = Column(Numeric(5, 2), default=0, nullable=False)  # annual %

     current_value = Column(Numeric(15, 2), nullable=True)
     status = Column(
          Enum(PropertyStatus, name="property_status", create_constraint=True),
          default=PropertyStatus.VACANT,
          nullable=False,
          index=True,
     )
     memo = Column(Text, nullable=True)

     # Relationships
     owner = relationship("User", back_populates="properties")
     leases = relationship("Lease", back_populates="property", cascade="all, delete-orphan")
     expenses = relationship("Expense", back_populates="property", cascade="all, delete-orphan")
     valuations = relationship("PropertyValuation", back_populates="property", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}', status='{self.status}')>"

     @property
     def effective_value(self):
          """Current market value, falling back to the purchase price when unset."""
          return self.current_value or self.purchase_price
