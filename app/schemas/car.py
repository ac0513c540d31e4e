from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

class CarInput(BaseModel):
    """
    Schema for creating or updating a car, in the frontend's camelCase shape.
    Required fields are checked by the car service so the error names the field.
    """
    name: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    category: Optional[str] = None
    pricePerDay: Optional[float] = None
    pricePerWeek: Optional[float] = None
    pricePerMonth: Optional[float] = None
    images: Optional[List[str]] = None
    features: Optional[List[str]] = None
    specifications: Optional[Dict[str, Any]] = None
    available: Optional[bool] = None
    availability: Optional[Dict[str, Any]] = None
    rating: Optional[float] = None
    reviewCount: Optional[int] = None
    description: Optional[str] = None
    popular: Optional[bool] = None
    featured: Optional[bool] = None

class CarResponse(BaseModel):
    """Car as returned to the frontend; storage columns are snake_case."""
    id: str
    name: str
    brand: str
    model: str
    year: int
    category: str
    pricePerDay: float = Field(..., validation_alias="price_per_day")
    pricePerWeek: Optional[float] = Field(None, validation_alias="price_per_week")
    pricePerMonth: Optional[float] = Field(None, validation_alias="price_per_month")
    images: List[str] = []
    features: List[str] = []
    specifications: Dict[str, Any] = {}
    available: bool = True
    availability: Dict[str, Any] = {}
    rating: float = 0
    reviewCount: int = Field(0, validation_alias="review_count")
    description: Optional[str] = None
    popular: bool = False
    featured: bool = False

    @field_validator("images", "features", mode="before")
    @classmethod
    def empty_list(cls, v):
        return v or []

    @field_validator("specifications", "availability", mode="before")
    @classmethod
    def empty_dict(cls, v):
        return v or {}

    @field_validator("rating", "reviewCount", mode="before")
    @classmethod
    def zero_default(cls, v):
        return v or 0

    @field_validator("popular", "featured", mode="before")
    @classmethod
    def false_default(cls, v):
        return bool(v)

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": "6f1c2b9e-4a53-4f0e-9d83-0b1f2f1c0a11",
                "name": "Toyota Vios 2023",
                "brand": "Toyota",
                "model": "Vios",
                "year": 2023,
                "category": "sedan",
                "pricePerDay": 1800.0,
                "pricePerWeek": 11500.0,
                "pricePerMonth": None,
                "images": [],
                "features": ["Bluetooth", "Backup camera"],
                "specifications": {"seats": 5, "transmission": "automatic"},
                "available": True,
                "availability": {"available": True, "locations": ["Main Branch"], "unavailableDates": []},
                "rating": 4.7,
                "reviewCount": 31,
                "description": "Fuel-efficient city sedan",
                "popular": True,
                "featured": False
            }
        }
    }

class CarSummary(BaseModel):
    """Car fields embedded in inquiry and booking responses."""
    id: str
    name: str
    brand: str
    model: str
    price_per_day: float

    model_config = {"from_attributes": True}
