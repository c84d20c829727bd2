# models/user.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class User(TimestampMixin, Base):
     """
     User model - property owner account.
     Every property, and transitively every lease and payment, is scoped to one user.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     name = Column(String(100), nullable=False)
     phone = Column(String(50), nullable=True)

     # Relationships
     properties = relationship("Property", back_populates="owner")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}')>"
