from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_admin_profile
from app.core.config import settings
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.car import CarInput, CarResponse
from app.schemas.common import MessageResponse, Page
from app.services import car_service

router = APIRouter()

@router.get("", response_model=Page[CarResponse])
def list_cars(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    """List the catalogue, newest first."""
    return car_service.list_cars(db, page, limit)

@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
def create_car(
    data: CarInput,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    """
    Add a car to the catalogue.

    Requires name, brand, model, year, category and pricePerDay.
    """
    return car_service.create_car(db, data)

@router.get("/{car_id}", response_model=CarResponse)
def get_car(car_id: str, db: Session = Depends(get_db)):
    return car_service.get_car(db, car_id)

@router.put("/{car_id}", response_model=CarResponse)
def update_car(
    car_id: str,
    data: CarInput,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    return car_service.update_car(db, car_id, data)

@router.delete("/{car_id}", response_model=MessageResponse)
def delete_car(
    car_id: str,
    _: Profile = Depends(get_admin_profile),
    db: Session = Depends(get_db),
):
    car_service.delete_car(db, car_id)
    return {"message": "Car deleted successfully"}
