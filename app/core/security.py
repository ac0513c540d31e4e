from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from jose.exceptions import JWTError
from passlib.context import CryptContext
from pydantic import BaseModel, Field, ValidationError

from app.core.config import settings
from app.core.errors import InvalidToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class TokenClaim(BaseModel):
    """Identity payload carried inside a bearer token."""
    user_id: str = Field(..., alias="userId")
    email: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[int] = None

    model_config = {"populate_by_name": True}

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)

def create_access_token(
    user_id: str,
    email: Optional[str],
    role: Optional[str],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a user-identity claim into a bearer token."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {
        "userId": user_id,
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def verify_token(token: str) -> TokenClaim:
    """
    Verify and decode a bearer token.

    Any failure (bad signature, malformed token, expiry, missing userId) raises
    InvalidToken. There is no revocation list, so a token stays valid for its
    whole lifetime even if the stored role changes; admin checks re-read the
    role from the database instead of trusting the claim.
    """
    try:
        # jose validates "exp" itself and raises ExpiredSignatureError (a JWTError)
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise InvalidToken()

    if not payload.get("userId"):
        raise InvalidToken()

    try:
        return TokenClaim(**payload)
    except ValidationError:
        raise InvalidToken()
