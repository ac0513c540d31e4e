"""
Inquiry workflow: customers request a car for a date range, admins respond,
and both sides are informed through notifications.

Notifications are written after the inquiry itself has been committed and are
best-effort (see notification_service.notify).
"""

import logging
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, Unavailable, ValidationError
from app.core.security import TokenClaim
from app.models.car import Car
from app.models.enums import InquiryStatus, NotificationType
from app.models.inquiry import Inquiry
from app.models.profile import Profile
from app.schemas.inquiry import InquiryCreate, InquiryUpdate
from app.services import notification_service
from app.services.access import get_profile
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("car_id", "pickup_date", "return_date", "pickup_location")
VALID_STATUSES = {status.value for status in InquiryStatus}

def create_inquiry(db: Session, claim: TokenClaim, data: InquiryCreate) -> Inquiry:
    """
    Persist a pending inquiry for an available car and notify every admin.

    Raises ValidationError when a required field is missing, NotFound when the
    car does not exist and Unavailable when its availability flag is off. No
    row and no notification is written in any of those cases.
    """
    if any(not getattr(data, field) for field in REQUIRED_FIELDS):
        raise ValidationError("Missing required fields")

    car = db.get(Car, data.car_id)
    if car is None:
        raise NotFound("Car not found")
    if not car.available:
        raise Unavailable("Car is not available")

    inquiry = Inquiry(
        user_id=claim.user_id,
        car_id=car.id,
        pickup_date=data.pickup_date,
        return_date=data.return_date,
        pickup_location=data.pickup_location,
        dropoff_location=data.dropoff_location or None,
        message=data.message or None,
        status=InquiryStatus.default().value,
    )
    try:
        db.add(inquiry)
        db.commit()
        db.refresh(inquiry)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating inquiry: {e}")
        raise BackendError("Failed to create inquiry")

    logger.info(f"Inquiry {inquiry.id} created by {claim.user_id} for car {car.id}")

    notification_service.notify(
        db,
        notification_service.admin_recipients(db),
        type=NotificationType.BOOKING_SUBMITTED.value,
        title="New Car Inquiry",
        message=f"New inquiry received for {car.brand} {car.model}",
        inquiry_id=inquiry.id,
    )
    return inquiry

def get_inquiry(db: Session, inquiry_id: str, claim: TokenClaim) -> Inquiry:
    """
    Fetch one inquiry. Non-admins only see their own; someone else's inquiry is
    reported as not found so its existence is not leaked.
    """
    caller = get_profile(db, claim.user_id)

    query = db.query(Inquiry).filter(Inquiry.id == inquiry_id)
    if not caller.is_admin:
        query = query.filter(Inquiry.user_id == caller.id)

    inquiry = query.first()
    if inquiry is None:
        raise NotFound("Inquiry not found")
    return inquiry

def list_inquiries(db: Session, claim: TokenClaim, page: int = 1, limit: int = 10) -> Dict[str, Any]:
    """Admins list every inquiry, everyone else only their own; newest first."""
    caller = get_profile(db, claim.user_id)

    query = db.query(Inquiry)
    if not caller.is_admin:
        query = query.filter(Inquiry.user_id == caller.id)

    return paginate(query.order_by(Inquiry.created_at.desc(), Inquiry.id), page, limit)

def update_inquiry_status(
    db: Session,
    inquiry_id: str,
    admin: Profile,
    update: InquiryUpdate,
) -> Inquiry:
    """
    Apply an admin's partial update (status and/or admin_response).

    `admin` must come from access.require_admin. Any enum value may follow any
    other; there is no transition graph. Setting a non-pending status notifies
    the inquiry owner every time, including when the status is unchanged.
    """
    changes = update.model_dump(exclude_unset=True)
    status = changes.get("status")

    if status and status not in VALID_STATUSES:
        raise ValidationError("Invalid status")

    inquiry = db.get(Inquiry, inquiry_id)
    if inquiry is None:
        raise NotFound("Inquiry not found")

    if status:
        inquiry.status = status
    if "admin_response" in changes:
        inquiry.admin_response = changes["admin_response"]

    try:
        db.commit()
        db.refresh(inquiry)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating inquiry {inquiry_id}: {e}")
        raise BackendError("Failed to update inquiry")

    logger.info(f"Inquiry {inquiry.id} updated by admin {admin.id}: {changes}")

    if status and status != InquiryStatus.PENDING.value:
        car = inquiry.car
        notification_service.notify(
            db,
            [inquiry.user_id],
            type=NotificationType.BOOKING_SUBMITTED.value,
            title="Inquiry Update",
            message=f"Your inquiry for {car.brand} {car.model} has been {status}",
            inquiry_id=inquiry.id,
        )
    return inquiry
