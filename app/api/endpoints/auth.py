from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_claim
from app.core.security import TokenClaim
from app.db.session import get_db
from app.schemas.auth import LoginRequest, LoginResponse, MeResponse, SignupRequest, SignupResponse
from app.services import auth_service

router = APIRouter()

@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    """
    Create a customer account.

    New accounts always get the `client` role.
    """
    profile = auth_service.signup(db, data)
    return {"message": "User created successfully", "user": profile}

@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Exchange e-mail and password for a bearer token valid for seven days."""
    return auth_service.login(db, data)

@router.get("/me", response_model=MeResponse)
def get_user_info(
    claim: TokenClaim = Depends(get_current_claim),
    db: Session = Depends(get_db),
):
    """Return the profile behind the bearer token."""
    return {"user": auth_service.current_profile(db, claim)}
