from typing import List, Optional
from pydantic import BaseModel

class BranchCreate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    notes: Optional[str] = None

class BranchUpdate(BranchCreate):
    id: Optional[str] = None
    is_active: Optional[bool] = None

class BranchResponse(BaseModel):
    id: str
    name: str
    address: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool

    model_config = {"from_attributes": True}

class BranchEnvelope(BaseModel):
    branch: BranchResponse

class BranchList(BaseModel):
    branches: List[BranchResponse]
