from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime

class NotificationResponse(BaseModel):
    id: str
    user_id: str
    type: str
    title: str
    message: str
    read: bool
    inquiry_id: Optional[str] = None
    booking_id: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}

class NotificationList(BaseModel):
    notifications: List[NotificationResponse]
    unreadCount: int

class NotificationMarkRead(BaseModel):
    """Either a single notification id or mark_all_read=true."""
    notification_id: Optional[str] = None
    mark_all_read: bool = False
