"""
Peak-season pricing and rental price quotes.

A day is in a season when start_date <= day <= end_date. Only active seasons
affect quotes; when seasons overlap, the one with the earliest start_date wins.
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError, NotFound, ValidationError
from app.models.car import Car
from app.models.enums import PricingType
from app.models.peak_season import PeakSeason
from app.schemas.pricing import PeakSeasonCreate, PeakSeasonUpdate

logger = logging.getLogger(__name__)

# Fallback long-rental rates when a car has no explicit weekly/monthly price
WEEKLY_RATE_FACTOR = 0.9
MONTHLY_RATE_FACTOR = 0.8

VALID_PRICING_TYPES = {pricing_type.value for pricing_type in PricingType}

def active_seasons(db: Session) -> List[PeakSeason]:
    return db.query(PeakSeason)\
        .filter(PeakSeason.is_active.is_(True))\
        .order_by(PeakSeason.start_date.asc(), PeakSeason.id)\
        .all()

def season_for(day: date, seasons: Iterable[PeakSeason]) -> Optional[PeakSeason]:
    for season in seasons:
        if season.start_date <= day <= season.end_date:
            return season
    return None

def day_rate(base_price: float, season: Optional[PeakSeason]) -> float:
    """Daily rate on a day covered by `season` (or the base rate off-season)."""
    if season is None:
        return base_price
    if season.pricing_type == PricingType.FIXED.value:
        return base_price + (season.fixed_increase or 0.0)
    return base_price * (season.price_multiplier or 1.0)

def rental_days(pickup_date: date, return_date: date) -> int:
    """Billable days; a same-day rental is billed as one day."""
    return max((return_date - pickup_date).days, 1)

def peak_season_price(
    base_price: float,
    pickup_date: date,
    return_date: date,
    seasons: List[PeakSeason],
) -> Tuple[float, float, float]:
    """
    Price each billable day at its own rate.

    Returns (total, peak_surcharge, applied_multiplier) where the multiplier is
    the highest daily rate relative to the base rate.
    """
    total = 0.0
    surcharge = 0.0
    applied_multiplier = 1.0
    for offset in range(rental_days(pickup_date, return_date)):
        rate = day_rate(base_price, season_for(pickup_date + timedelta(days=offset), seasons))
        total += rate
        if rate > base_price:
            surcharge += rate - base_price
        if base_price:
            applied_multiplier = max(applied_multiplier, rate / base_price)
    return total, surcharge, applied_multiplier

def long_rental_price(
    base_price: float,
    days: int,
    price_per_week: Optional[float] = None,
    price_per_month: Optional[float] = None,
) -> Tuple[float, float, float]:
    """
    Off-season price of `days` days with weekly and monthly rates applied.

    Returns (price, weekly_discount, monthly_discount). Leftover days are
    charged at the daily rate.
    """
    price = base_price * days
    weekly_discount = 0.0
    monthly_discount = 0.0

    if days >= 7:
        weekly_rate = price_per_week or base_price * 7 * WEEKLY_RATE_FACTOR
        weeks, remaining = divmod(days, 7)
        weekly_price = weekly_rate * weeks + base_price * remaining
        weekly_discount = price - weekly_price
        price = weekly_price

    if days >= 30:
        monthly_rate = price_per_month or base_price * 30 * MONTHLY_RATE_FACTOR
        months, remaining = divmod(days, 30)
        monthly_price = monthly_rate * months + base_price * remaining
        monthly_discount = price - monthly_price
        price = monthly_price

    return price, max(weekly_discount, 0.0), max(monthly_discount, 0.0)

def quote(db: Session, car: Car, pickup_date: date, return_date: date) -> Dict[str, Any]:
    """Price breakdown for renting `car` over the date range."""
    base_price = car.price_per_day or 0.0
    days = rental_days(pickup_date, return_date)

    _, peak_surcharge, applied_multiplier = peak_season_price(
        base_price, pickup_date, return_date, active_seasons(db)
    )
    price, weekly_discount, monthly_discount = long_rental_price(
        base_price, days, car.price_per_week, car.price_per_month
    )

    return {
        "basePrice": base_price,
        "days": days,
        "subtotal": base_price * days,
        "peakSurcharge": peak_surcharge,
        "appliedMultiplier": applied_multiplier,
        "weeklyDiscount": weekly_discount,
        "monthlyDiscount": monthly_discount,
        "totalPrice": round(price + peak_surcharge, 2),
    }

def list_peak_seasons(db: Session, active_only: bool = True, on_date: Optional[date] = None) -> Dict[str, Any]:
    """Seasons ordered by start date, plus the multiplier in force on `on_date`."""
    query = db.query(PeakSeason)
    if active_only:
        query = query.filter(PeakSeason.is_active.is_(True))
    seasons = query.order_by(PeakSeason.start_date.asc(), PeakSeason.id).all()

    date_multiplier = 1.0
    if on_date:
        season = season_for(on_date, seasons)
        if season is not None:
            date_multiplier = season.price_multiplier or 1.0

    return {"pricing": seasons, "dateMultiplier": date_multiplier}

def _check_season(pricing_type: Optional[str], start_date: Optional[date], end_date: Optional[date]) -> None:
    if pricing_type and pricing_type not in VALID_PRICING_TYPES:
        raise ValidationError("Invalid pricing type")
    if start_date and end_date and end_date < start_date:
        raise ValidationError("end_date must not be before start_date")

def create_peak_season(db: Session, data: PeakSeasonCreate) -> PeakSeason:
    if not data.name or not data.start_date or not data.end_date:
        raise ValidationError("Missing required fields")
    _check_season(data.pricing_type, data.start_date, data.end_date)

    season = PeakSeason(
        name=data.name,
        start_date=data.start_date,
        end_date=data.end_date,
        pricing_type=data.pricing_type or PricingType.MULTIPLIER.value,
        price_multiplier=data.price_multiplier or 1.0,
        fixed_increase=data.fixed_increase or 0.0,
        is_active=True,
        notes=data.notes,
    )
    try:
        db.add(season)
        db.commit()
        db.refresh(season)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating peak season: {e}")
        raise BackendError("Failed to create peak season pricing")

    logger.info(f"Peak season {season.id} created: {season.name} {season.start_date}..{season.end_date}")
    return season

def update_peak_season(db: Session, data: PeakSeasonUpdate) -> PeakSeason:
    if not data.id:
        raise ValidationError("Pricing ID required")

    season = db.get(PeakSeason, data.id)
    if season is None:
        raise NotFound("Pricing not found")

    changes = data.model_dump(exclude_unset=True, exclude={"id"})
    _check_season(
        changes.get("pricing_type"),
        changes.get("start_date", season.start_date),
        changes.get("end_date", season.end_date),
    )
    for field, value in changes.items():
        setattr(season, field, value)
    try:
        db.commit()
        db.refresh(season)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating peak season {data.id}: {e}")
        raise BackendError("Failed to update peak season pricing")
    return season
