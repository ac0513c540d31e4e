import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, String

def generate_uuid() -> str:
    return str(uuid.uuid4())

class BaseModel:
    """Base class for all database models."""

    # UUID primary keys stored as text, matching the hosted Postgres schema
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
