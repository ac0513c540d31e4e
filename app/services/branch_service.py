import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, ValidationError
from app.models.branch import Branch
from app.schemas.branch import BranchCreate, BranchUpdate

logger = logging.getLogger(__name__)

def list_branches(db: Session, active_only: bool = True) -> List[Branch]:
    query = db.query(Branch)
    if active_only:
        query = query.filter(Branch.is_active.is_(True))
    return query.order_by(Branch.name.asc(), Branch.id).all()

def create_branch(db: Session, data: BranchCreate) -> Branch:
    if not data.name:
        raise ValidationError("Branch name is required")

    branch = Branch(**data.model_dump(), is_active=True)
    try:
        db.add(branch)
        db.commit()
        db.refresh(branch)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating branch: {e}")
        raise BackendError("Failed to create branch")

    logger.info(f"Branch {branch.id} created: {branch.name}")
    return branch

def update_branch(db: Session, data: BranchUpdate) -> Branch:
    if not data.id:
        raise ValidationError("Branch ID required")

    branch = db.get(Branch, data.id)
    if branch is None:
        raise NotFound("Branch not found")

    for field, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(branch, field, value)
    try:
        db.commit()
        db.refresh(branch)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating branch {data.id}: {e}")
        raise BackendError("Failed to update branch")
    return branch
