from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile
from app.core.config import settings
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.expense import ExpenseCreate, ExpenseEnvelope, ExpensePage
from app.services import expense_service

router = APIRouter()

@router.get("", response_model=ExpensePage)
def list_expenses(
    car_id: Optional[str] = None,
    type: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    """Filtered expense ledger (admin only) with the summed amount."""
    return expense_service.list_expenses(db, car_id, type, start_date, end_date, page, limit)

@router.post("", response_model=ExpenseEnvelope, status_code=status.HTTP_201_CREATED)
def create_expense(
    data: ExpenseCreate,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"expense": expense_service.create_expense(db, data)}
