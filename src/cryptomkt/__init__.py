"""cryptomkt: asyncio client for the CryptoMarket exchange REST API."""

from .api import CryptoMktApi
from .auth import Credentials
from .client import Client
from .errors import (
    ApiError,
    ApiErrorKind,
    CryptoMktError,
    DecodeError,
    InvalidArgument,
    NetworkError,
)
from .factory import create_client_from_settings
from .market import Market
from .models import Balance, Order, OrderBookEntry, OrderType, Payment, Ticker, Trade
from .settings import Settings

__all__ = [
    "CryptoMktApi",
    "Credentials",
    "Client",
    "Market",
    "OrderType",
    "Ticker",
    "OrderBookEntry",
    "Trade",
    "Balance",
    "Order",
    "Payment",
    "Settings",
    "create_client_from_settings",
    "CryptoMktError",
    "NetworkError",
    "DecodeError",
    "InvalidArgument",
    "ApiError",
    "ApiErrorKind",
]
