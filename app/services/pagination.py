"""
Offset/limit pagination shared by every list endpoint.
"""

import math
from typing import Any, Dict

from sqlalchemy.orm import Query

from app.core.errors import ValidationError


def page_offset(page: int, limit: int) -> int:
    """Zero-based row offset of a 1-based page."""
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def validate_page_params(page: int, limit: int) -> None:
    if page < 1:
        raise ValidationError("page must be at least 1")
    if limit < 1:
        raise ValidationError("limit must be at least 1")


def paginate(query: Query, page: int, limit: int) -> Dict[str, Any]:
    """
    Apply offset/limit to an already filtered and ordered query.

    `total` is an exact count of the filtered query, taken before the
    page window is applied.
    """
    validate_page_params(page, limit)
    total = query.order_by(None).count()
    items = query.offset(page_offset(page, limit)).limit(limit).all()
    return {
        "items": items,
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": total_pages(total, limit),
    }
