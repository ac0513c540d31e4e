"""
Customer verification documents: owners upload, admins verify.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, ValidationError
from app.core.security import TokenClaim
from app.models.document import CustomerDocument
from app.models.profile import Profile
from app.schemas.document import DocumentCreate, DocumentVerify
from app.services.access import is_admin
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

def list_documents(
    db: Session,
    claim: TokenClaim,
    document_type: Optional[str] = None,
    verified_only: bool = False,
    page: int = 1,
    limit: int = 10,
) -> Dict[str, Any]:
    query = db.query(CustomerDocument)
    # Admins can see all documents
    if not is_admin(db, claim):
        query = query.filter(CustomerDocument.user_id == claim.user_id)

    if document_type:
        query = query.filter(CustomerDocument.document_type == document_type)
    if verified_only:
        query = query.filter(CustomerDocument.is_verified.is_(True))

    return paginate(query.order_by(CustomerDocument.created_at.desc(), CustomerDocument.id), page, limit)

def upload_document(db: Session, claim: TokenClaim, data: DocumentCreate) -> CustomerDocument:
    if not data.document_type or not data.document_name or not data.document_url:
        raise ValidationError("Missing required fields")

    document = CustomerDocument(
        user_id=claim.user_id,
        document_type=data.document_type,
        document_name=data.document_name,
        document_url=data.document_url,
        expiry_date=data.expiry_date,
        is_verified=False,
    )
    try:
        db.add(document)
        db.commit()
        db.refresh(document)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating document: {e}")
        raise BackendError("Failed to upload document")

    logger.info(f"Document {document.id} ({document.document_type}) uploaded by {claim.user_id}")
    return document

def verify_document(db: Session, admin: Profile, data: DocumentVerify) -> CustomerDocument:
    """Record an admin's verification decision. `admin` must come from access.require_admin."""
    if not data.id:
        raise ValidationError("Document ID required")

    document = db.get(CustomerDocument, data.id)
    if document is None:
        raise NotFound("Document not found")

    document.is_verified = data.is_verified
    document.verified_by = admin.id
    document.verified_at = datetime.utcnow()
    document.notes = data.notes or None
    try:
        db.commit()
        db.refresh(document)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating document {data.id}: {e}")
        raise BackendError("Failed to update document")

    logger.info(f"Document {document.id} verified={document.is_verified} by {admin.id}")
    return document
