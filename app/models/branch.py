"""
SQLAlchemy model for the branches table.
"""

from sqlalchemy import Boolean, Column, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel

class Branch(Base, BaseModel):
    __tablename__ = "branches"

    name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    contact_number = Column(String, nullable=True)
    email = Column(String, nullable=True)
    opening_time = Column(String, nullable=True)  # e.g. "08:00"
    closing_time = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Branch {self.name}>"
