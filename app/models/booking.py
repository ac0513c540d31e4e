"""
SQLAlchemy model for the bookings table.
"""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.db.base_model import BaseModel
from app.models.enums import BookingStatus, PaymentStatus

class Booking(Base, BaseModel):
    """A confirmed-or-pending reservation of a car for a date range."""
    __tablename__ = "bookings"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    car_id = Column(String(36), ForeignKey("cars.id"), nullable=False, index=True)

    pickup_date = Column(Date, nullable=False)
    return_date = Column(Date, nullable=False)
    pickup_location = Column(String, nullable=False)
    dropoff_location = Column(String, nullable=True)

    status = Column(String, nullable=False, default=BookingStatus.PENDING.value, index=True)
    total_price = Column(Float, nullable=False)
    payment_status = Column(String, nullable=False, default=PaymentStatus.PENDING.value)
    drivers_license_verified = Column(Boolean, nullable=False, default=False)
    admin_notes = Column(Text, nullable=True)

    car = relationship("Car", lazy="joined")

    def __repr__(self):
        return f"<Booking {self.id} car={self.car_id} {self.pickup_date}..{self.return_date}>"
