from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile, get_current_claim
from app.core.config import settings
from app.core.security import TokenClaim
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.common import Page
from app.schemas.document import DocumentCreate, DocumentEnvelope, DocumentResponse, DocumentVerify
from app.services import document_service

router = APIRouter()

@router.get("", response_model=Page[DocumentResponse])
def list_documents(
    type: Optional[str] = None,
    verified_only: bool = False,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """The caller's documents, or every customer's documents for admins."""
    return document_service.list_documents(db, claim, type, verified_only, page, limit)

@router.post("", response_model=DocumentEnvelope, status_code=status.HTTP_201_CREATED)
def upload_document(
    data: DocumentCreate,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    return {"document": document_service.upload_document(db, claim, data)}

@router.put("", response_model=DocumentEnvelope)
def verify_document(
    data: DocumentVerify,
    admin: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    """Record an admin's verification decision on a document."""
    return {"document": document_service.verify_document(db, admin, data)}
