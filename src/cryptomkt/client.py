"""CryptoMarket client.

Print the current ticker of every market::

    async with Client(API_KEY, API_SECRET) as client:
        for market in await client.get_markets():
            print(market.get_name(), await market.get_current_ticker())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .api import DEFAULT_API_VERSION, DEFAULT_DOMAIN, CryptoMktApi
from .market import Market
from .models import Balance, Order, Payment
from .transport import AiohttpTransport, HttpRequest, ProxyConfig
from .validation import (
    DateLike,
    Number,
    format_positive,
    require_id,
    validate_date_range,
    validate_pagination,
)

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)


class Client:
    """Entry point to the exchange: markets, balance and payments."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        settings: "Settings | None" = None,
        transport: HttpRequest | None = None,
    ):
        """Create a client. Performs no I/O.

        Args:
            api_key: CryptoMarket API key
            api_secret: CryptoMarket API secret
            settings: Optional settings (endpoint, timeout, proxy)
            transport: Custom HTTP transport; built from settings if omitted
        """
        domain = DEFAULT_DOMAIN
        api_version = DEFAULT_API_VERSION
        if settings is not None:
            domain = settings.base_url
            api_version = settings.api_version
            if transport is None:
                transport = _transport_from_settings(settings)

        self.api = CryptoMktApi(
            api_key,
            api_secret,
            domain=domain,
            api_version=api_version,
            transport=transport,
        )

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_markets(self) -> list[Market]:
        """List every market available on the exchange."""
        resp = await self.api.get("market", list[str], public=True)
        logger.debug("Exchange lists %d markets", len(resp.data))
        return [Market(self.api, name) for name in resp.data]

    def create_market(self, name: str) -> Market:
        """Return a handle for ``name`` without checking that it exists."""
        return Market(self.api, name)

    async def get_balance(self) -> list[Balance]:
        """Balances of every wallet of the account."""
        resp = await self.api.get("balance", list[Balance])
        return resp.data

    async def get_order_status(self, order_id: str) -> Order:
        order_id = require_id(order_id, "order_id")
        resp = await self.api.get("orders/status", Order, {"id": order_id})
        return resp.data

    async def create_payment_order(
        self,
        to_receive: Number,
        to_receive_currency: str,
        payment_receiver: str,
        *,
        external_id: str | None = None,
        callback_url: str | None = None,
        error_url: str | None = None,
        success_url: str | None = None,
        refund_email: str | None = None,
        language: str | None = None,
    ) -> Payment:
        """Create a payment order, returning the QR and URL to pay it."""
        payload = {
            "to_receive": format_positive(to_receive, "to_receive"),
            "to_receive_currency": require_id(to_receive_currency, "to_receive_currency").upper(),
            "payment_receiver": require_id(payment_receiver, "payment_receiver"),
        }
        optional = {
            "external_id": external_id,
            "callback_url": callback_url,
            "error_url": error_url,
            "success_url": success_url,
            "refund_email": refund_email,
            "language": language,
        }
        payload.update({k: v for k, v in optional.items() if v is not None})

        resp = await self.api.post("payment/new_order", Payment, payload)
        logger.info("Created payment order %s", resp.data.id)
        return resp.data

    async def payment_order_status(self, payment_id: str) -> Payment:
        payment_id = require_id(payment_id, "payment_id")
        resp = await self.api.get("payment/status", Payment, {"id": payment_id})
        return resp.data

    async def get_payment_orders(
        self,
        start_date: DateLike,
        end_date: DateLike,
        page: int = 0,
        limit: int = 20,
    ) -> list[Payment]:
        """Payment orders created between two dates."""
        start, end = validate_date_range(start_date, end_date)
        page, limit = validate_pagination(page, limit)
        params = {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "page": page,
            "limit": limit,
        }
        resp = await self.api.get("payment/orders", list[Payment], params)
        return resp.data

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.api.close()


def _transport_from_settings(settings: "Settings") -> AiohttpTransport:
    proxy = None
    if settings.proxy.enabled:
        proxy = ProxyConfig(
            url=settings.proxy.url,
            username=settings.proxy.username,
            password=settings.proxy.password.get_secret_value() if settings.proxy.password else None,
        )
    return AiohttpTransport(
        timeout=settings.timeout,
        proxy=proxy,
        user_agent=settings.user_agent,
    )
