from typing import Any, List, Optional
from pydantic import BaseModel, Field
from datetime import date

class PeakSeasonCreate(BaseModel):
    name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    pricing_type: Optional[str] = Field(None, description="multiplier (default) or fixed")
    price_multiplier: Optional[float] = Field(None, description="Daily rate factor for multiplier seasons")
    fixed_increase: Optional[float] = Field(None, description="Amount added to the daily rate for fixed seasons")
    notes: Optional[str] = None

class PeakSeasonUpdate(PeakSeasonCreate):
    id: Optional[str] = None
    is_active: Optional[bool] = None

class PeakSeasonResponse(BaseModel):
    id: str
    name: str
    start_date: date
    end_date: date
    pricing_type: str
    price_multiplier: float
    fixed_increase: float
    is_active: bool
    notes: Optional[str] = None

    model_config = {"from_attributes": True}

class PeakSeasonEnvelope(BaseModel):
    pricing: PeakSeasonResponse

class PeakSeasonList(BaseModel):
    pricing: List[PeakSeasonResponse]
    dateMultiplier: float = Field(..., description="Multiplier in force on the requested date, 1.0 outside any season")

class QuotedCar(BaseModel):
    id: str
    name: str
    brand: str
    model: str
    price_per_day: float

class DateRange(BaseModel):
    pickupDate: date
    returnDate: date
    days: int

class PriceBreakdown(BaseModel):
    basePrice: float
    days: int
    subtotal: float
    peakSurcharge: float
    appliedMultiplier: float
    weeklyDiscount: float
    monthlyDiscount: float
    totalPrice: float

class ConflictingBooking(BaseModel):
    id: str
    pickupDate: date
    returnDate: date

class AvailabilityResponse(BaseModel):
    """
    Availability answer for a car and date range.

    Unavailable answers carry `reason` (and `conflictingBookings` when other
    bookings hold the dates); available ones carry the price quote.
    """
    available: bool
    reason: Optional[str] = None
    conflictingBookings: Optional[List[ConflictingBooking]] = None
    car: Optional[QuotedCar] = None
    dateRange: Optional[DateRange] = None
    pricing: Optional[PriceBreakdown] = None
    location: Optional[List[Any]] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "available": True,
                "car": {"id": "C123", "name": "Toyota Vios", "brand": "Toyota", "model": "Vios", "price_per_day": 1800},
                "dateRange": {"pickupDate": "2025-12-20", "returnDate": "2025-12-23", "days": 3},
                "pricing": {
                    "basePrice": 1800,
                    "days": 3,
                    "subtotal": 5400,
                    "peakSurcharge": 1080,
                    "appliedMultiplier": 1.2,
                    "weeklyDiscount": 0,
                    "monthlyDiscount": 0,
                    "totalPrice": 6480,
                },
                "location": ["Main Branch"],
            }
        }
    }
