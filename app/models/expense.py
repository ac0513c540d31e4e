"""
SQLAlchemy model for the expenses table.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel

class Expense(Base, BaseModel):
    """Operating cost booked against a car (fuel, repairs, insurance, ...)."""
    __tablename__ = "expenses"

    car_id = Column(String(36), ForeignKey("cars.id"), nullable=False, index=True)
    expense_type = Column(String, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    receipt_url = Column(String, nullable=True)
    expense_date = Column(Date, nullable=False, index=True)

    def __repr__(self):
        return f"<Expense {self.expense_type} {self.amount} on {self.expense_date}>"
