import logging
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import Base, engine
# Importing the models registers every table on Base.metadata
import app.models  # noqa: F401

logger = logging.getLogger(__name__)

def init_db(bind=None):
    """
    Initialize the database by creating any missing car rental tables.
    Existing tables are left untouched.
    """
    bind = bind or engine
    try:
        for table in Base.metadata.sorted_tables:
            table.create(bind, checkfirst=True)
            logger.info(f"Table {table.name} ready")

        logger.info("Car rental tables created successfully")
    except SQLAlchemyError as e:
        logger.error(f"Error creating database tables: {e}")
        raise
