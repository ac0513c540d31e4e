"""
Custom e-mail/password authentication against the profiles table.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AuthError, BackendError, Conflict, NotFound, ValidationError
from app.core.security import TokenClaim, create_access_token, hash_password, verify_password
from app.models.enums import UserRole
from app.models.profile import Profile
from app.schemas.auth import LoginRequest, SignupRequest

logger = logging.getLogger(__name__)

def signup(db: Session, data: SignupRequest) -> Profile:
    """Create a client profile. The role is always client, whatever the request says."""
    if not data.email or not data.password or not data.full_name:
        raise ValidationError("Email, password, and full name are required")

    email = data.email.strip().lower()
    if db.query(Profile.id).filter(Profile.email == email).first():
        raise Conflict("User already exists")

    profile = Profile(
        email=email,
        password_hash=hash_password(data.password),
        full_name=data.full_name,
        phone=data.phone or None,
        role=UserRole.CLIENT.value,
    )
    try:
        db.add(profile)
        db.commit()
        db.refresh(profile)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Profile creation error: {e}")
        raise BackendError("Failed to create user")

    logger.info(f"Created profile {profile.id}")
    return profile

def login(db: Session, data: LoginRequest) -> dict:
    """Check credentials and return a signed token plus the profile."""
    if not data.email or not data.password:
        raise ValidationError("Email and password are required")

    profile = db.query(Profile).filter(Profile.email == data.email.strip().lower()).first()
    # Same message for unknown e-mail and wrong password
    if profile is None or not verify_password(data.password, profile.password_hash):
        raise AuthError("Invalid credentials")

    token = create_access_token(profile.id, profile.email, profile.role)
    return {"token": token, "user": profile}

def current_profile(db: Session, claim: TokenClaim) -> Profile:
    profile = db.get(Profile, claim.user_id)
    if profile is None:
        raise NotFound("User not found")
    return profile
