# models/expense.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, Boolean, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ExpenseType(str, enum.Enum):
     PROPERTY_TAX = "PROPERTY_TAX"
     INCOME_TAX = "INCOME_TAX"
     MAINTENANCE = "MAINTENANCE"
     INSURANCE = "INSURANCE"
     MANAGEMENT_FEE = "MANAGEMENT_FEE"
     LOAN_INTEREST = "LOAN_INTEREST"
     VACANCY_COST = "VACANCY_COST"
     AGENT_FEE = "AGENT_FEE"
     OTHER = "OTHER"


class Expense(TimestampMixin, Base):
     """Expense model - a dated cost attributed to one property."""

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     expense_type = Column(
          Enum(ExpenseType, name="expense_type", create_constraint=True),
          nullable=False,
     )
     amount = Column(Numeric(15, 2), nullable=False)
     expense_date = Column(Date, nullable=False, index=True)
     description = Column(String(500), nullable=True)
     is_recurring = Column(Boolean, default=False, nullable=False)
     recurring_month = Column(Integer, nullable=True)
     memo = Column(Text, nullable=True)

     property = relationship("Property", back_populates="expenses")

     def __repr__(self):
          return f"<Expense(id={self.id}, type='{self.expense_type}', amount={self.amount})>"
