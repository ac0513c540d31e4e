"""
SQLAlchemy model for the cars table.
"""

from sqlalchemy import Boolean, Column, Float, Integer, JSON, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel

def default_availability() -> dict:
    return {"available": True, "locations": [], "unavailableDates": []}

class Car(Base, BaseModel):
    """
    Rental unit offered in the catalogue.
    `available` is the flag checked by inquiries and bookings; `availability`
    is the denormalized object shown to the frontend.
    """
    __tablename__ = "cars"

    name = Column(String, nullable=False)
    brand = Column(String, nullable=False, index=True)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    category = Column(String, nullable=False, index=True)

    # Pricing
    price_per_day = Column(Float, nullable=False)
    price_per_week = Column(Float, nullable=True)
    price_per_month = Column(Float, nullable=True)

    images = Column(JSON, nullable=False, default=list)
    features = Column(JSON, nullable=False, default=list)
    specifications = Column(JSON, nullable=False, default=dict)

    available = Column(Boolean, nullable=False, default=True)
    availability = Column(JSON, nullable=False, default=default_availability)

    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)
    popular = Column(Boolean, nullable=False, default=False)
    featured = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Car {self.brand} {self.model} ({self.year})>"
