from typing import Optional
from pydantic import BaseModel, Field
from datetime import date, datetime

class DocumentCreate(BaseModel):
    document_type: Optional[str] = Field(None, description="e.g. 'drivers_license', 'valid_id'")
    document_name: Optional[str] = None
    document_url: Optional[str] = Field(None, description="Where the uploaded file is hosted")
    expiry_date: Optional[date] = None

class DocumentVerify(BaseModel):
    id: Optional[str] = Field(None, description="Document to verify")
    is_verified: bool = False
    notes: Optional[str] = None

class DocumentResponse(BaseModel):
    id: str
    user_id: str
    document_type: str
    document_name: str
    document_url: str
    expiry_date: Optional[date] = None
    is_verified: bool
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}

class DocumentEnvelope(BaseModel):
    document: DocumentResponse
