from fastapi import APIRouter

from app.api.endpoints import (
    auth,
    bookings,
    branches,
    cars,
    documents,
    expenses,
    health,
    inquiries,
    notifications,
    peak_pricing,
)

# Create API router
api_router = APIRouter()

# Include endpoint routers with appropriate prefixes and tags
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(cars.router, prefix="/cars", tags=["cars"])
api_router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(branches.router, prefix="/branches", tags=["branches"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(peak_pricing.router, prefix="/peak-pricing", tags=["peak-pricing"])
