"""
Enumerations shared by models, schemas and services.
"""

from enum import Enum


class UserRole(str, Enum):
    CLIENT = "client"
    ADMIN = "admin"


class InquiryStatus(str, Enum):
    """Inquiry lifecycle. New inquiries always start as PENDING."""
    PENDING = "pending"
    RESPONDED = "responded"
    CLOSED = "closed"

    @classmethod
    def default(cls) -> "InquiryStatus":
        return cls.PENDING


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class NotificationType(str, Enum):
    BOOKING_SUBMITTED = "booking_submitted"


class PricingType(str, Enum):
    """How a peak season raises the daily rate."""
    MULTIPLIER = "multiplier"
    FIXED = "fixed"
