from typing import Optional
from pydantic import BaseModel, Field
from datetime import date, datetime

from app.schemas.car import CarSummary

class BookingCreate(BaseModel):
    car_id: Optional[str] = None
    pickup_date: Optional[date] = None
    return_date: Optional[date] = None
    pickup_location: Optional[str] = None
    dropoff_location: Optional[str] = None
    total_price: Optional[float] = Field(None, description="Quoted total for the whole rental")
    drivers_license_verified: bool = False

class BookingUpdate(BaseModel):
    status: Optional[str] = Field(None, description="pending, confirmed, rejected, completed or cancelled")
    admin_notes: Optional[str] = None

class BookingResponse(BaseModel):
    id: str
    user_id: str
    car_id: str
    pickup_date: date
    return_date: date
    pickup_location: str
    dropoff_location: Optional[str] = None
    status: str
    total_price: float
    payment_status: str
    drivers_license_verified: bool
    admin_notes: Optional[str] = None
    created_at: datetime
    cars: Optional[CarSummary] = Field(None, validation_alias="car")

    model_config = {"from_attributes": True}

class BookingEnvelope(BaseModel):
    booking: BookingResponse
