"""Argument checks applied before any request is sent."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidArgument
from .models import OrderType

MAX_PAGE_LIMIT = 100
DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date]
Number = Union[Decimal, float, int, str]


def validate_pagination(page: int, limit: int) -> tuple[int, int]:
    """Check page/limit bounds.

    Raises:
        InvalidArgument: If page is negative or limit is outside 1..MAX_PAGE_LIMIT
    """
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise InvalidArgument(f"page must be a non-negative integer, got {page!r}")
    if isinstance(limit, bool) or not isinstance(limit, int) or not 0 < limit <= MAX_PAGE_LIMIT:
        raise InvalidArgument(f"limit must be between 1 and {MAX_PAGE_LIMIT}, got {limit!r}")
    return page, limit


def parse_date(value: DateLike, name: str = "date") -> date:
    """Parse a YYYY-MM-DD string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be a YYYY-MM-DD string, got {value!r}")
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidArgument(f"{name} must be a YYYY-MM-DD string, got {value!r}") from e


def validate_date_range(start: DateLike, end: DateLike) -> tuple[date, date]:
    """Parse both ends of a date range and check start <= end."""
    start_date = parse_date(start, "start_date")
    end_date = parse_date(end, "end_date")
    if start_date > end_date:
        raise InvalidArgument(f"start_date {start_date} is after end_date {end_date}")
    return start_date, end_date


def format_positive(value: Number, name: str) -> str:
    """Render a strictly positive number the way the API expects it."""
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgument(f"{name} must be a number, got {value!r}") from e
    if not number.is_finite() or number <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value!r}")
    return format(number.normalize(), "f")


def parse_side(side: OrderType | str) -> OrderType:
    """Accept an OrderType or its string value ('buy'/'sell')."""
    if isinstance(side, OrderType):
        return side
    try:
        return OrderType(str(side).strip().lower())
    except ValueError as e:
        raise InvalidArgument(f"side must be 'buy' or 'sell', got {side!r}") from e


def require_id(value: str | int, name: str = "id") -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise InvalidArgument(f"{name} must not be empty")
    return text
