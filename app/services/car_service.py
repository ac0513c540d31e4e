"""
Car catalogue CRUD. Requests and responses use the frontend's camelCase keys;
this module maps them onto the snake_case columns.
"""

import logging
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, ValidationError
from app.models.car import Car, default_availability
from app.schemas.car import CarInput
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "brand", "model", "year", "category", "pricePerDay")

# camelCase input key -> column
FIELD_MAP = {
    "name": "name",
    "brand": "brand",
    "model": "model",
    "year": "year",
    "category": "category",
    "pricePerDay": "price_per_day",
    "pricePerWeek": "price_per_week",
    "pricePerMonth": "price_per_month",
    "images": "images",
    "features": "features",
    "specifications": "specifications",
    "available": "available",
    "availability": "availability",
    "rating": "rating",
    "reviewCount": "review_count",
    "description": "description",
    "popular": "popular",
    "featured": "featured",
}

def _require_fields(data: CarInput) -> None:
    for field in REQUIRED_FIELDS:
        if not getattr(data, field):
            raise ValidationError(f"Missing required field: {field}")

def _to_columns(data: CarInput, only_set: bool) -> Dict[str, Any]:
    values = data.model_dump(exclude_unset=only_set)
    return {FIELD_MAP[key]: value for key, value in values.items() if key in FIELD_MAP}

def _sync_availability(car: Car, columns: Dict[str, Any]) -> None:
    """Keep the `available` flag and the availability object consistent."""
    availability = dict(car.availability or default_availability())
    if columns.get("available") is not None:
        availability["available"] = columns["available"]
    car.available = bool(availability.get("available", True))
    car.availability = availability

def list_cars(db: Session, page: int = 1, limit: int = 10) -> Dict[str, Any]:
    return paginate(db.query(Car).order_by(Car.created_at.desc(), Car.id), page, limit)

def get_car(db: Session, car_id: str) -> Car:
    car = db.get(Car, car_id)
    if car is None:
        raise NotFound("Car not found")
    return car

def create_car(db: Session, data: CarInput) -> Car:
    _require_fields(data)

    columns = _to_columns(data, only_set=False)
    car = Car(
        name=columns["name"],
        brand=columns["brand"],
        model=columns["model"],
        year=columns["year"],
        category=columns["category"],
        price_per_day=columns["price_per_day"],
        price_per_week=columns["price_per_week"],
        price_per_month=columns["price_per_month"],
        images=columns["images"] or [],
        features=columns["features"] or [],
        specifications=columns["specifications"] or {},
        availability=columns["availability"] or default_availability(),
        rating=columns["rating"] or 0,
        review_count=columns["review_count"] or 0,
        description=columns["description"] or "",
        popular=bool(columns["popular"]),
        featured=bool(columns["featured"]),
    )
    _sync_availability(car, columns)

    try:
        db.add(car)
        db.commit()
        db.refresh(car)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating car: {e}")
        raise BackendError("Failed to create car")

    logger.info(f"Car {car.id} created: {car.brand} {car.model}")
    return car

def update_car(db: Session, car_id: str, data: CarInput) -> Car:
    """
    Update a car. The identifying fields must always be present; every other
    field is only written when it appears in the request.
    """
    _require_fields(data)
    car = get_car(db, car_id)

    columns = _to_columns(data, only_set=True)
    for column, value in columns.items():
        if column in ("available", "availability"):
            continue
        setattr(car, column, value)
    if columns.get("availability") is not None:
        car.availability = columns["availability"]
    _sync_availability(car, columns)

    try:
        db.commit()
        db.refresh(car)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating car {car_id}: {e}")
        raise BackendError("Failed to update car")

    logger.info(f"Car {car.id} updated")
    return car

def delete_car(db: Session, car_id: str) -> None:
    car = get_car(db, car_id)
    try:
        db.delete(car)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting car {car_id}: {e}")
        raise BackendError("Failed to delete car")
    logger.info(f"Car {car_id} deleted")
