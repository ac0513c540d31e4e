from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")

class Page(BaseModel, Generic[T]):
    """Envelope returned by every paginated list endpoint."""
    items: List[T] = Field(..., description="Items on this page")
    total: int = Field(..., description="Exact number of items matching the filters")
    page: int = Field(..., description="1-based page number")
    limit: int = Field(..., description="Page size")
    totalPages: int = Field(..., description="ceil(total / limit)")

class MessageResponse(BaseModel):
    message: str
