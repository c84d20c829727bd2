# models/base.py
import re

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Declarative base for the portfolio models.

     Table names are derived from the class name unless a model sets
     ``__tablename__`` itself.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          # PropertyValuation -> property_valuations, Property -> properties
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          if name.endswith('y'):
               return name[:-1] + 'ies'
          if name.endswith('s'):
               return name + 'es'
          return name + 's'


class TimestampMixin:
     """created_at set by the database on insert; updated_at on every ORM update."""

     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, onupdate=func.now(), nullable=True)
