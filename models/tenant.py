# models/tenant.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Tenant(TimestampMixin, Base):
     """
     Tenant model - a lessee that may hold leases on several properties.

     Tenants carry no owner column; an owner sees a tenant only through a
     lease on one of the owner's properties.
     """
     __tablename__ = "tenants"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), nullable=False)
     phone = Column(String(50), nullable=True)
     email = Column(String(255), nullable=True)
     id_number = Column(String(100), nullable=True)
     memo = Column(Text, nullable=True)

     # Relationships
     leases = relationship("Lease", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
