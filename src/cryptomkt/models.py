"""Typed response models.

Every response from the exchange comes wrapped in an envelope::

    {"status": "success", "pagination": {...}, "data": ...}

Unknown fields are ignored; missing required fields fail validation.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Generic, Optional, TypeVar, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

T = TypeVar("T")


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from the exchange are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class OrderType(Enum):
    """Side of an order."""

    BUY = "buy"
    SELL = "sell"


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


class Pagination(_Model):
    previous: Optional[Union[int, str]] = None
    next: Optional[Union[int, str]] = None
    page: int = 0
    limit: int = 20


class ApiResponse(_Model, Generic[T]):
    """Response envelope."""

    status: str
    data: Optional[T] = None
    message: Optional[str] = None
    pagination: Optional[Pagination] = None


class Ticker(_Model):
    """Snapshot of price and volume statistics for a market."""

    market: str
    last_price: Decimal
    volume: Decimal
    high: Decimal
    low: Decimal
    bid: Optional[Decimal] = None
    ask: Optional[Decimal] = None
    timestamp: UtcDatetime


class OrderBookEntry(_Model):
    """One outstanding order in the book."""

    price: Decimal
    amount: Decimal
    timestamp: UtcDatetime
    side: Optional[OrderType] = None


class Trade(_Model):
    """One executed trade."""

    model_config = ConfigDict(populate_by_name=True)

    market: Optional[str] = None
    price: Decimal
    amount: Decimal
    timestamp: UtcDatetime
    side: Optional[OrderType] = Field(default=None, alias="market_taker")


class Balance(_Model):
    wallet: str
    available: Decimal
    balance: Decimal


class OrderAmount(_Model):
    original: Optional[Decimal] = None
    remaining: Optional[Decimal] = None
    executed: Optional[Decimal] = None


class Order(_Model):
    """An order placed by the account holder."""

    id: str
    status: str
    type: OrderType
    market: str
    price: Decimal
    amount: OrderAmount = Field(default_factory=OrderAmount)
    execution_price: Optional[Decimal] = None
    avg_execution_price: Optional[Decimal] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None
    executed_at: Optional[UtcDatetime] = None


class Payment(_Model):
    """A payment order created through the payments API."""

    id: str
    external_id: Optional[str] = None
    status: int
    to_receive: Optional[Decimal] = None
    to_receive_currency: Optional[str] = None
    expected_amount: Optional[Decimal] = None
    expected_currency: Optional[str] = None
    deposit_address: Optional[str] = None
    refund_email: Optional[str] = None
    qr: Optional[str] = None
    obs: Optional[str] = None
    callback_url: Optional[str] = None
    error_url: Optional[str] = None
    success_url: Optional[str] = None
    payment_url: Optional[str] = None
    remaining: Optional[Decimal] = None
    language: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None
    server_at: Optional[UtcDatetime] = None
