from typing import List, Optional
from pydantic import BaseModel
from datetime import date, datetime

class ExpenseCreate(BaseModel):
    car_id: Optional[str] = None
    expense_type: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    expense_date: Optional[date] = None

class ExpenseResponse(BaseModel):
    id: str
    car_id: str
    expense_type: str
    amount: float
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    expense_date: date
    created_at: datetime

    model_config = {"from_attributes": True}

class ExpenseEnvelope(BaseModel):
    expense: ExpenseResponse

class ExpensePage(BaseModel):
    """Paginated expenses plus the summed amount of the whole filtered set."""
    items: List[ExpenseResponse]
    total: int
    page: int
    limit: int
    totalPages: int
    totalAmount: float
