from typing import Optional
from pydantic import BaseModel, Field
from datetime import date, datetime

from app.schemas.car import CarSummary

class InquiryCreate(BaseModel):
    """
    Schema for submitting an inquiry.
    There is no status field: new inquiries always start as pending.
    """
    car_id: Optional[str] = Field(None, description="Car being requested")
    pickup_date: Optional[date] = Field(None, description="First rental day")
    return_date: Optional[date] = Field(None, description="Last rental day")
    pickup_location: Optional[str] = Field(None, description="Where the car is collected")
    dropoff_location: Optional[str] = Field(None, description="Where the car is returned, if different")
    message: Optional[str] = Field(None, description="Free-text note for the admins")

class InquiryUpdate(BaseModel):
    """Admin update. Only the fields present in the request body are applied."""
    status: Optional[str] = Field(None, description="One of 'pending', 'responded', 'closed'")
    admin_response: Optional[str] = Field(None, description="Reply shown to the customer")

class InquiryResponse(BaseModel):
    id: str
    user_id: str
    car_id: str
    pickup_date: date
    return_date: date
    pickup_location: str
    dropoff_location: Optional[str] = None
    message: Optional[str] = None
    status: str
    admin_response: Optional[str] = None
    created_at: datetime
    cars: Optional[CarSummary] = Field(None, validation_alias="car")

    model_config = {"from_attributes": True}

class InquiryEnvelope(BaseModel):
    inquiry: InquiryResponse
