"""
Role checks backed by the stored profile rather than the token's role claim.
"""

import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound
from app.core.security import TokenClaim
from app.models.profile import Profile

logger = logging.getLogger(__name__)

def get_profile(db: Session, user_id: str) -> Profile:
    profile = db.get(Profile, user_id)
    if profile is None:
        raise NotFound("Profile not found")
    return profile

def is_admin(db: Session, claim: TokenClaim) -> bool:
    profile = db.get(Profile, claim.user_id)
    return profile is not None and profile.is_admin

def require_admin(db: Session, claim: TokenClaim, detail: str = "Admin access required") -> Profile:
    """
    Return the caller's profile if its stored role is admin, else raise Forbidden.

    Must run before any side effect of an admin-only operation.
    """
    profile = db.get(Profile, claim.user_id)
    if profile is None or not profile.is_admin:
        logger.warning(f"User {claim.user_id} denied admin access")
        raise Forbidden(detail)
    return profile
