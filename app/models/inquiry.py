"""
SQLAlchemy model for the inquiries table.
"""

from sqlalchemy import Column, Date, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.db.base_model import BaseModel
from app.models.enums import InquiryStatus

class Inquiry(Base, BaseModel):
    """
    A customer's request to rent a car for a date range.
    Status is never supplied by the client at creation; it starts as pending.
    """
    __tablename__ = "inquiries"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    car_id = Column(String(36), ForeignKey("cars.id"), nullable=False, index=True)

    pickup_date = Column(Date, nullable=False)
    return_date = Column(Date, nullable=False)
    pickup_location = Column(String, nullable=False)
    dropoff_location = Column(String, nullable=True)
    message = Column(Text, nullable=True)

    status = Column(String, nullable=False, default=lambda: InquiryStatus.default().value)
    admin_response = Column(Text, nullable=True)

    car = relationship("Car", lazy="joined")

    def __repr__(self):
        return f"<Inquiry {self.id} car={self.car_id} status={self.status}>"
