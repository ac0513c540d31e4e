import os

# Point the app at SQLite before any app module builds its engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import TokenClaim, create_access_token
from app.db.init_db import init_db
from app.db.session import Base, get_db
from app.main import app
from app.models import Car, Inquiry, Profile
from app.models.enums import UserRole

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    init_db(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_profile(db, email, role=UserRole.CLIENT, password_hash=None, full_name=None):
    profile = Profile(
        email=email,
        role=role.value,
        password_hash=password_hash,
        full_name=full_name or email.split("@")[0].title(),
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def make_car(db, brand="Toyota", model="Vios", available=True, **overrides):
    values = dict(
        name=f"{brand} {model}",
        brand=brand,
        model=model,
        year=2023,
        category="sedan",
        price_per_day=1800.0,
        available=available,
        availability={"available": available, "locations": [], "unavailableDates": []},
    )
    values.update(overrides)
    car = Car(**values)
    db.add(car)
    db.commit()
    db.refresh(car)
    return car


def make_inquiry(db, owner, car, **overrides):
    values = dict(
        user_id=owner.id,
        car_id=car.id,
        pickup_date=date(2025, 6, 1),
        return_date=date(2025, 6, 5),
        pickup_location="Main Branch",
    )
    values.update(overrides)
    inquiry = Inquiry(**values)
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    return inquiry


def claim_for(profile):
    return TokenClaim(userId=profile.id, email=profile.email, role=profile.role)


def auth_headers(profile):
    token = create_access_token(profile.id, profile.email, profile.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer(db):
    return make_profile(db, "alice@example.com")


@pytest.fixture
def other_customer(db):
    return make_profile(db, "bob@example.com")


@pytest.fixture
def admin(db):
    return make_profile(db, "admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def second_admin(db):
    return make_profile(db, "ops@example.com", role=UserRole.ADMIN)


@pytest.fixture
def car(db):
    return make_car(db, id="C123")
