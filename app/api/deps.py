from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.errors import AuthError
from app.core.security import TokenClaim, verify_token
from app.db.session import get_db
from app.models.profile import Profile
from app.services.access import require_admin

BEARER_PREFIX = "Bearer "

def get_current_claim(authorization: Optional[str] = Header(None)) -> TokenClaim:
    """
    Dependency that decodes the caller's bearer token.

    A missing header or a header without the Bearer prefix is "No token
    provided"; anything wrong with the token itself is "Invalid token".
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("No token provided")
    return verify_token(authorization[len(BEARER_PREFIX):])

def get_admin_profile(
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
) -> Profile:
    """Dependency to require the admin role, checked against the stored profile."""
    return require_admin(db, claim)
