from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.pricing import PeakSeasonCreate, PeakSeasonEnvelope, PeakSeasonList, PeakSeasonUpdate
from app.services import pricing_service

router = APIRouter()

@router.get("", response_model=PeakSeasonList)
def list_peak_seasons(
    active_only: bool = True,
    on_date: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """Peak seasons by start date; pass `date` to get the multiplier in force that day."""
    return pricing_service.list_peak_seasons(db, active_only, on_date)

@router.post("", response_model=PeakSeasonEnvelope, status_code=status.HTTP_201_CREATED)
def create_peak_season(
    data: PeakSeasonCreate,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"pricing": pricing_service.create_peak_season(db, data)}

@router.put("", response_model=PeakSeasonEnvelope)
def update_peak_season(
    data: PeakSeasonUpdate,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"pricing": pricing_service.update_peak_season(db, data)}
