"""
SQLAlchemy model for the profiles table.
"""

from sqlalchemy import Column, String

from app.db.session import Base
from app.db.base_model import BaseModel
from app.models.enums import UserRole

class Profile(Base, BaseModel):
    """
    Identity record for customers and admins.
    The password hash is only populated for accounts created through /api/auth/signup.
    """
    __tablename__ = "profiles"

    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=True)
    role = Column(String, nullable=False, default=UserRole.CLIENT.value, index=True)
    full_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def __repr__(self):
        return f"<Profile {self.email} ({self.role})>"
