"""
Best-effort notification fan-out and the recipient-facing notification inbox.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, ValidationError
from app.core.security import TokenClaim
from app.models.enums import UserRole
from app.models.notification import Notification
from app.models.profile import Profile

logger = logging.getLogger(__name__)

def admin_recipients(db: Session) -> List[str]:
    """Ids of every profile whose stored role is admin."""
    rows = db.query(Profile.id).filter(Profile.role == UserRole.ADMIN.value).all()
    return [row.id for row in rows]

def notify(
    db: Session,
    recipients: Iterable[str],
    type: str,
    title: str,
    message: str,
    inquiry_id: Optional[str] = None,
    booking_id: Optional[str] = None,
) -> int:
    """
    Write one notification row per recipient and return how many were written.

    Each row is committed on its own. A failed write is rolled back, logged and
    skipped; it never propagates to the caller, whose own mutation has already
    been committed. There is no retry and no ordering across recipients.
    """
    written = 0
    for user_id in recipients:
        try:
            db.add(Notification(
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                read=False,
                inquiry_id=inquiry_id,
                booking_id=booking_id,
            ))
            db.commit()
            written += 1
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to write notification for user {user_id}: {e}")
    logger.info(f"Notification '{title}' delivered to {written} recipient(s)")
    return written

def list_for_user(
    db: Session,
    claim: TokenClaim,
    unread_only: bool = False,
    limit: int = 20,
) -> Dict[str, Any]:
    if limit < 1:
        raise ValidationError("limit must be at least 1")

    query = db.query(Notification).filter(Notification.user_id == claim.user_id)
    if unread_only:
        query = query.filter(Notification.read.is_(False))

    notifications = query.order_by(Notification.created_at.desc(), Notification.id).limit(limit).all()
    unread_count = sum(1 for n in notifications if not n.read)
    return {"notifications": notifications, "unreadCount": unread_count}

def mark_read(db: Session, claim: TokenClaim, notification_id: str) -> int:
    """Mark one of the caller's notifications as read. Other users' rows are never touched."""
    try:
        updated = db.query(Notification)\
            .filter(Notification.id == notification_id, Notification.user_id == claim.user_id)\
            .update({Notification.read: True}, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error marking notification {notification_id} as read: {e}")
        raise BackendError("Failed to mark notification as read")
    return updated

def mark_all_read(db: Session, claim: TokenClaim) -> int:
    try:
        updated = db.query(Notification)\
            .filter(Notification.user_id == claim.user_id)\
            .update({Notification.read: True}, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error marking all notifications as read for {claim.user_id}: {e}")
        raise BackendError("Failed to mark notifications as read")
    return updated
