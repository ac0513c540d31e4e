"""
Bookings: date-range reservations with an overlap check per car.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, Unavailable, ValidationError
from app.core.security import TokenClaim
from app.models.booking import Booking
from app.models.car import Car
from app.models.enums import BookingStatus, PaymentStatus
from app.models.profile import Profile
from app.schemas.booking import BookingCreate, BookingUpdate
from app.services import pricing_service
from app.services.access import get_profile
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("car_id", "pickup_date", "return_date", "pickup_location", "total_price")
VALID_STATUSES = {status.value for status in BookingStatus}

# Bookings in these states no longer hold the car
RELEASED_STATUSES = (BookingStatus.REJECTED.value, BookingStatus.CANCELLED.value)

def _overlapping(db: Session, car_id: str, pickup_date, return_date):
    return db.query(Booking).filter(
        Booking.car_id == car_id,
        Booking.status.notin_(RELEASED_STATUSES),
        Booking.pickup_date <= return_date,
        Booking.return_date >= pickup_date,
    )

def conflicting_bookings(db: Session, car_id: str, pickup_date, return_date) -> List[Booking]:
    """Live bookings of the car that overlap [pickup_date, return_date], earliest first."""
    return _overlapping(db, car_id, pickup_date, return_date)\
        .order_by(Booking.pickup_date.asc(), Booking.id)\
        .all()

def has_conflict(db: Session, car_id: str, pickup_date, return_date) -> bool:
    return _overlapping(db, car_id, pickup_date, return_date).first() is not None

def check_availability(
    db: Session,
    car_id: Optional[str],
    pickup_date: Optional[date],
    return_date: Optional[date],
) -> Dict[str, Any]:
    """
    Say whether a car can be booked for the dates and, if so, quote the price.

    A car that is switched off or already booked is not an error: the answer
    is `available: false` with a reason.
    """
    if not car_id or not pickup_date or not return_date:
        raise ValidationError("car_id, pickup_date, and return_date are required")
    if return_date < pickup_date:
        raise ValidationError("return_date must not be before pickup_date")

    car = db.get(Car, car_id)
    if car is None:
        raise NotFound("Car not found")
    if not car.available:
        return {"available": False, "reason": "Car is currently not available for rental"}

    conflicts = conflicting_bookings(db, car.id, pickup_date, return_date)
    if conflicts:
        return {
            "available": False,
            "reason": "Car is already booked for the selected dates",
            "conflictingBookings": [
                {"id": b.id, "pickupDate": b.pickup_date, "returnDate": b.return_date}
                for b in conflicts
            ],
        }

    pricing = pricing_service.quote(db, car, pickup_date, return_date)
    return {
        "available": True,
        "car": {
            "id": car.id,
            "name": car.name,
            "brand": car.brand,
            "model": car.model,
            "price_per_day": car.price_per_day,
        },
        "dateRange": {"pickupDate": pickup_date, "returnDate": return_date, "days": pricing["days"]},
        "pricing": pricing,
        "location": (car.availability or {}).get("locations") or [],
    }

def create_booking(db: Session, claim: TokenClaim, data: BookingCreate) -> Booking:
    if any(not getattr(data, field) for field in REQUIRED_FIELDS):
        raise ValidationError("Missing required fields")
    if data.return_date < data.pickup_date:
        raise ValidationError("return_date must not be before pickup_date")

    car = db.get(Car, data.car_id)
    if car is None:
        raise NotFound("Car not found")
    if not car.available:
        raise Unavailable("Car is not available")
    if has_conflict(db, car.id, data.pickup_date, data.return_date):
        raise Unavailable("Car is not available for the selected dates")

    booking = Booking(
        user_id=claim.user_id,
        car_id=car.id,
        pickup_date=data.pickup_date,
        return_date=data.return_date,
        pickup_location=data.pickup_location,
        dropoff_location=data.dropoff_location or None,
        total_price=data.total_price,
        status=BookingStatus.PENDING.value,
        payment_status=PaymentStatus.PENDING.value,
        drivers_license_verified=data.drivers_license_verified,
    )
    try:
        db.add(booking)
        db.commit()
        db.refresh(booking)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating booking: {e}")
        raise BackendError("Failed to create booking")

    logger.info(f"Booking {booking.id} created by {claim.user_id} for car {car.id}")
    return booking

def list_bookings(
    db: Session,
    claim: TokenClaim,
    status: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
) -> Dict[str, Any]:
    caller = get_profile(db, claim.user_id)

    query = db.query(Booking)
    # If not admin, only show the caller's own bookings
    if not caller.is_admin:
        query = query.filter(Booking.user_id == caller.id)
    if status:
        query = query.filter(Booking.status == status)

    return paginate(query.order_by(Booking.created_at.desc(), Booking.id), page, limit)

def update_booking(db: Session, booking_id: str, admin: Profile, update: BookingUpdate) -> Booking:
    changes = update.model_dump(exclude_unset=True)
    status = changes.get("status")
    if status and status not in VALID_STATUSES:
        raise ValidationError("Invalid status")

    booking = db.get(Booking, booking_id)
    if booking is None:
        raise NotFound("Booking not found")

    if status:
        booking.status = status
    if "admin_notes" in changes:
        booking.admin_notes = changes["admin_notes"]

    try:
        db.commit()
        db.refresh(booking)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating booking {booking_id}: {e}")
        raise BackendError("Failed to update booking")

    logger.info(f"Booking {booking.id} updated by admin {admin.id}: {changes}")
    return booking
