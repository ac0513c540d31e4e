from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

db_url = str(settings.SQLALCHEMY_DATABASE_URI)

# SQLite (local runs, tests) needs to be shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

engine = create_engine(
    db_url,
    connect_args=connect_args,
    pool_pre_ping=True  # The hosted pooler drops idle connections
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    Request-scoped database session.
    Every request gets its own session; it is closed once the response is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
