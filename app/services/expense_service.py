import logging
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, ValidationError
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

def list_expenses(
    db: Session,
    car_id: Optional[str] = None,
    expense_type: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    page: int = 1,
    limit: int = 10,
) -> Dict[str, Any]:
    """
    Page through expenses, newest first. `totalAmount` sums the whole filtered
    set, not just the current page.
    """
    filters = []
    if car_id:
        filters.append(Expense.car_id == car_id)
    if expense_type:
        filters.append(Expense.expense_type == expense_type)
    if start_date:
        filters.append(Expense.expense_date >= start_date)
    if end_date:
        filters.append(Expense.expense_date <= end_date)

    query = db.query(Expense).filter(*filters).order_by(Expense.expense_date.desc(), Expense.id)
    result = paginate(query, page, limit)

    total_amount = db.query(func.coalesce(func.sum(Expense.amount), 0)).filter(*filters).scalar()
    result["totalAmount"] = float(total_amount or 0)
    return result

def create_expense(db: Session, data: ExpenseCreate) -> Expense:
    if not data.car_id or not data.expense_type or not data.amount or not data.expense_date:
        raise ValidationError("Missing required fields")

    expense = Expense(**data.model_dump())
    try:
        db.add(expense)
        db.commit()
        db.refresh(expense)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating expense: {e}")
        raise BackendError("Failed to create expense")

    logger.info(f"Expense {expense.id} recorded for car {expense.car_id}: {expense.amount}")
    return expense
