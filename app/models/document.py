"""
SQLAlchemy model for the customer_documents table.
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel

class CustomerDocument(Base, BaseModel):
    """Verification artifact (license, ID, ...) uploaded by a customer."""
    __tablename__ = "customer_documents"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    document_type = Column(String, nullable=False, index=True)
    document_name = Column(String, nullable=False)
    document_url = Column(String, nullable=False)
    expiry_date = Column(Date, nullable=True)

    # Set by an admin
    is_verified = Column(Boolean, nullable=False, default=False)
    verified_by = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    verified_at = Column(DateTime, nullable=True)
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<CustomerDocument {self.document_type} for {self.user_id}>"
