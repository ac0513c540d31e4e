from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_claim
from app.core.config import settings
from app.core.security import TokenClaim
from app.db.session import get_db
from app.schemas.common import Page
from app.schemas.inquiry import InquiryCreate, InquiryEnvelope, InquiryResponse, InquiryUpdate
from app.services import inquiry_service
from app.services.access import require_admin

router = APIRouter()

@router.post("", response_model=InquiryEnvelope, status_code=status.HTTP_201_CREATED)
def create_inquiry(
    data: InquiryCreate,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """
    Submit a rental inquiry for an available car.

    Every admin receives a notification once the inquiry is stored.
    """
    return {"inquiry": inquiry_service.create_inquiry(db, claim, data)}

@router.get("", response_model=Page[InquiryResponse])
def list_inquiries(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """Admins see every inquiry; customers see their own."""
    return inquiry_service.list_inquiries(db, claim, page, limit)

@router.get("/{inquiry_id}", response_model=InquiryEnvelope)
def get_inquiry(
    inquiry_id: str,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    return {"inquiry": inquiry_service.get_inquiry(db, inquiry_id, claim)}

@router.put("/{inquiry_id}", response_model=InquiryEnvelope)
def update_inquiry(
    inquiry_id: str,
    update: InquiryUpdate,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """
    Set an inquiry's status and/or admin response (admin only).

    The owner is notified whenever the new status is not `pending`.
    """
    admin = require_admin(db, claim, detail="Unauthorized")
    return {"inquiry": inquiry_service.update_inquiry_status(db, inquiry_id, admin, update)}
