"""
SQLAlchemy model for the peak_season_pricing table.
"""

from sqlalchemy import Boolean, Column, Date, Float, String, Text

from app.db.session import Base
from app.db.base_model import BaseModel
from app.models.enums import PricingType

class PeakSeason(Base, BaseModel):
    """A date range (inclusive on both ends) during which daily rates go up."""
    __tablename__ = "peak_season_pricing"

    name = Column(String, nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    pricing_type = Column(String, nullable=False, default=PricingType.MULTIPLIER.value)
    price_multiplier = Column(Float, nullable=False, default=1.0)
    fixed_increase = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<PeakSeason {self.name} {self.start_date}..{self.end_date}>"
