from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile, get_current_claim
from app.core.config import settings
from app.core.security import TokenClaim
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.booking import BookingCreate, BookingEnvelope, BookingResponse, BookingUpdate
from app.schemas.common import Page
from app.schemas.pricing import AvailabilityResponse
from app.services import booking_service

router = APIRouter()

@router.get("", response_model=Page[BookingResponse])
def list_bookings(
    status: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    return booking_service.list_bookings(db, claim, status, page, limit)

@router.get("/availability", response_model=AvailabilityResponse, response_model_exclude_none=True)
def check_availability(
    car_id: Optional[str] = None,
    pickup_date: Optional[date] = None,
    return_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """Public availability check with a price quote that includes peak-season rates."""
    return booking_service.check_availability(db, car_id, pickup_date, return_date)

@router.post("", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """Reserve a car, provided no live booking overlaps the requested dates."""
    return {"booking": booking_service.create_booking(db, claim, data)}

@router.put("/{booking_id}", response_model=BookingEnvelope)
def update_booking(
    booking_id: str,
    update: BookingUpdate,
    admin: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return {"booking": booking_service.update_booking(db, booking_id, admin, update)}
