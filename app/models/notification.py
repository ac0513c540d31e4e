"""
SQLAlchemy model for the notifications table.
"""

from sqlalchemy import Boolean, Column, ForeignKey, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel

class Notification(Base, BaseModel):
    """In-app message for a single recipient."""
    __tablename__ = "notifications"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False, index=True)

    inquiry_id = Column(String(36), ForeignKey("inquiries.id"), nullable=True)
    booking_id = Column(String(36), ForeignKey("bookings.id"), nullable=True)

    def __repr__(self):
        return f"<Notification {self.id} for {self.user_id}: {self.title}>"
