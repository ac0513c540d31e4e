"""
Import all models from their respective modules.
"""

from app.models.profile import Profile
from app.models.car import Car
from app.models.inquiry import Inquiry
from app.models.booking import Booking
from app.models.notification import Notification
from app.models.document import CustomerDocument
from app.models.branch import Branch
from app.models.expense import Expense
from app.models.peak_season import PeakSeason

# Export all models
__all__ = [
    "Profile",
    "Car",
    "Inquiry",
    "Booking",
    "Notification",
    "CustomerDocument",
    "Branch",
    "Expense",
    "PeakSeason",
]
