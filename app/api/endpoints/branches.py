from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.branch import BranchCreate, BranchEnvelope, BranchList, BranchUpdate
from app.services import branch_service

router = APIRouter()

@router.get("", response_model=BranchList)
def list_branches(active_only: bool = True, db: Session = Depends(get_db)):
    """Public list of branches ordered by name; inactive ones only on request."""
    return {"branches": branch_service.list_branches(db, active_only)}

@router.post("", response_model=BranchEnvelope, status_code=status.HTTP_201_CREATED)
def create_branch(
    data: BranchCreate,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"branch": branch_service.create_branch(db, data)}

@router.put("", response_model=BranchEnvelope)
def update_branch(
    data: BranchUpdate,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"branch": branch_service.update_branch(db, data)}
