import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.api import api_router
from app.core.config import settings
from app.core.errors import add_exception_handlers
from app.core.middleware import add_middleware

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Car rental API: catalogue, inquiries, bookings, documents and admin tooling",
    version="0.1.0",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

# Set CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_middleware(app)
add_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {
        "message": "Welcome to the Car Rental API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info("Starting car rental API...")
    # Tables are created by setup_db.py, not on every start
    logger.info("Run `python setup_db.py` once to create missing tables")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
