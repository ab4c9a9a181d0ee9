"""Market handle: one tradable pair on the exchange."""

from __future__ import annotations

import logging
from datetime import date

from .api import CryptoMktApi
from .errors import DecodeError
from .models import Order, OrderBookEntry, OrderType, Ticker, Trade
from .normalization import normalize_market, split_market
from .validation import (
    DateLike,
    Number,
    format_positive,
    parse_side,
    require_id,
    validate_date_range,
    validate_pagination,
)

logger = logging.getLogger(__name__)


class Market:
    """A tradable pair, e.g. ETHCLP.

    Public data (ticker, book, trades) needs no credentials. Order methods
    are signed with the credentials of the Client that created the market.
    """

    def __init__(self, api: CryptoMktApi, name: str):
        self.api = api
        self.name = normalize_market(name)

    def __repr__(self) -> str:
        return f"Market({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Market):
            return NotImplemented
        return self.name == other.name and self.api is other.api

    def __hash__(self) -> int:
        return hash(self.name)

    def get_name(self) -> str:
        return self.name

    @property
    def base(self) -> str:
        return split_market(self.name)[0]

    @property
    def quote(self) -> str:
        return split_market(self.name)[1]

    async def get_current_ticker(self) -> Ticker:
        """Fetch the current ticker for this market."""
        resp = await self.api.get("ticker", list[Ticker], {"market": self.name}, public=True)
        for ticker in resp.data:
            if ticker.market.upper() == self.name:
                return ticker
        raise DecodeError(f"Ticker response has no entry for {self.name}")

    async def get_orders_book(self, side: OrderType, offset: int = 0, limit: int = 20) -> list[OrderBookEntry]:
        """Fetch one page of the order book.

        Args:
            side: OrderType.BUY or OrderType.SELL
            offset: Page number, starting at 0
            limit: Entries per page (1..100)

        Returns:
            At most ``limit`` entries, all tagged with ``side``, in server order
        """
        side = parse_side(side)
        offset, limit = validate_pagination(offset, limit)
        params = {"market": self.name, "type": side.value, "page": offset, "limit": limit}
        resp = await self.api.get("book", list[OrderBookEntry], params, public=True)
        return [entry.model_copy(update={"side": side}) for entry in resp.data[:limit]]

    async def get_trades(
        self,
        start_date: DateLike,
        end_date: DateLike,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Trade]:
        """Fetch trades between two dates, both inclusive.

        Args:
            start_date: First day, YYYY-MM-DD or date
            end_date: Last day, YYYY-MM-DD or date
            offset: Page number, starting at 0
            limit: Trades per page (1..100)

        Returns:
            Trades in chronological order
        """
        start, end = validate_date_range(start_date, end_date)
        offset, limit = validate_pagination(offset, limit)
        params = {
            "market": self.name,
            "start": start.isoformat(),
            "end": end.isoformat(),
            "page": offset,
            "limit": limit,
        }
        resp = await self.api.get("trades", list[Trade], params, public=True)

        trades = [t for t in resp.data if _within(t.timestamp.date(), start, end)]
        if len(trades) != len(resp.data):
            logger.debug(
                "Dropped %d trades outside %s..%s for %s",
                len(resp.data) - len(trades), start, end, self.name,
            )
        return sorted(trades, key=lambda t: t.timestamp)

    async def create_order(self, side: OrderType, amount: Number, price: Number) -> Order:
        """Place a limit order. Not idempotent: never retried here."""
        side = parse_side(side)
        payload = {
            "amount": format_positive(amount, "amount"),
            "market": self.name,
            "price": format_positive(price, "price"),
            "type": side.value,
        }
        resp = await self.api.post("orders/create", Order, payload)
        logger.info("Created %s order %s on %s", side.value, resp.data.id, self.name)
        return resp.data

    async def cancel_order(self, order_id: str) -> Order:
        order_id = require_id(order_id, "order_id")
        resp = await self.api.post("orders/cancel", Order, {"id": order_id})
        logger.info("Cancelled order %s on %s", order_id, self.name)
        return resp.data

    async def get_active_orders(self, page: int = 0, limit: int = 20) -> list[Order]:
        page, limit = validate_pagination(page, limit)
        resp = await self.api.get("orders/active", list[Order], {"market": self.name, "page": page, "limit": limit})
        return resp.data

    async def get_executed_orders(self, page: int = 0, limit: int = 20) -> list[Order]:
        page, limit = validate_pagination(page, limit)
        resp = await self.api.get("orders/executed", list[Order], {"market": self.name, "page": page, "limit": limit})
        return resp.data


def _within(day: date, start: date, end: date) -> bool:
    return start <= day <= end
