from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_current_claim
from app.core.config import settings
from app.core.errors import ValidationError
from app.core.security import TokenClaim
from app.db.session import get_db
from app.schemas.common import MessageResponse
from app.schemas.notification import NotificationList, NotificationMarkRead
from app.services import notification_service

router = APIRouter()

@router.get("", response_model=NotificationList)
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(settings.NOTIFICATION_LIST_LIMIT, ge=1, le=settings.MAX_PAGE_SIZE),
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """The caller's notifications, newest first, with the unread count."""
    return notification_service.list_for_user(db, claim, unread_only, limit)

@router.put("", response_model=MessageResponse)
def mark_notifications_read(
    data: NotificationMarkRead,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    if data.mark_all_read:
        notification_service.mark_all_read(db, claim)
        return {"message": "All notifications marked as read"}

    if not data.notification_id:
        raise ValidationError("Notification ID required")

    notification_service.mark_read(db, claim, data.notification_id)
    return {"message": "Notification marked as read"}
