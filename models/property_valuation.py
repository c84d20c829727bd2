# models/property_valuation.py
"""
PropertyValuation model - immutable profitability snapshot.

Rows are written once by the valuation calculator and never updated; a new
calculation always inserts a new row.
"""
from sqlalchemy import Column, Integer, Numeric, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class PropertyValuation(Base):

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     # Inputs
     annual_rent = Column(Numeric(15, 2), nullable=False)
     total_deposit = Column(Numeric(15, 2), nullable=False)
     annual_expense = Column(Numeric(15, 2), nullable=False)  # includes loan interest
     net_income = Column(Numeric(15, 2), nullable=False)
     total_investment = Column(Numeric(15, 2), nullable=False)

     # Yields (percent, 2 dp)
     gross_yield = Column(Numeric(15, 2), nullable=False)
     net_yield = Column(Numeric(15, 2), nullable=False)
     cash_on_cash = Column(Numeric(15, 2), nullable=False)

     # Sale simulation
     target_yield = Column(Numeric(5, 2), nullable=False)
     suggested_price = Column(Numeric(15, 2), nullable=False)
     expected_profit = Column(Numeric(15, 2), nullable=False)

     memo = Column(Text, nullable=True)
     calculated_at = Column(DateTime, server_default=func.now(), nullable=False)

     property = relationship("Property", back_populates="valuations")

     def __repr__(self):
          return f"<PropertyValuation(id={self.id}, property_id={self.property_id}, gross_yield={self.gross_yield})>"
