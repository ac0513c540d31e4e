import logging

from fastapi import APIRouter, Depends
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import Base, get_db

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/")
async def health_check(db: Session = Depends(get_db)):
    """
    Report API and database status.

    The database is "degraded" when it answers but some car rental tables
    are missing (run setup_db.py).
    """
    health_status = {
        "status": "healthy",
        "api": "online",
        "database": "online",
    }

    try:
        db.execute(text("SELECT 1"))
        existing = set(inspect(db.get_bind()).get_table_names())
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["database"] = "offline"
        health_status["status"] = "unhealthy"
        return health_status

    missing = sorted(set(Base.metadata.tables) - existing)
    if missing:
        health_status["database"] = "degraded"
        health_status["missing_tables"] = missing

    return health_status
