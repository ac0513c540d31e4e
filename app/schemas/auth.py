from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

class SignupRequest(BaseModel):
    """Schema for creating a customer account."""
    email: Optional[str] = Field(None, description="Login e-mail, unique per profile")
    password: Optional[str] = Field(None, description="Plain-text password, stored as a bcrypt hash")
    full_name: Optional[str] = Field(None, description="Customer's full name")
    phone: Optional[str] = Field(None, description="Contact phone number")

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class ProfileResponse(BaseModel):
    """Public view of a profile. Never includes the password hash."""
    id: str
    email: str
    role: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class SignupResponse(BaseModel):
    message: str
    user: ProfileResponse

class LoginResponse(BaseModel):
    token: str
    user: ProfileResponse

class MeResponse(BaseModel):
    user: ProfileResponse
