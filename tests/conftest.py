"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret."""
    return "test_api_secret_789012"


@pytest.fixture
def mock_transport():
    """Transport whose get/post return canned bodies."""
    transport = MagicMock()
    transport.get = AsyncMock(return_value=json.dumps({"status": "success", "data": []}))
    transport.post = AsyncMock(return_value=json.dumps({"status": "success", "data": {}}))
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def sample_markets_response():
    """Sample market list response."""
    return {"status": "success", "data": ["ETHCLP", "ETHARS", "BTCCLP"]}


@pytest.fixture
def sample_ticker_response():
    """Sample ticker response."""
    return {
        "status": "success",
        "data": [
            {
                "high": "214000",
                "volume": "15.23",
                "low": "200000",
                "ask": "206000",
                "timestamp": "2018-05-15T18:02:00.000000",
                "bid": "205000",
                "last_price": "205500",
                "market": "ETHCLP",
            }
        ],
    }


@pytest.fixture
def sample_book_response():
    """Sample order book response."""
    return {
        "status": "success",
        "pagination": {"previous": "null", "limit": 20, "page": 0, "next": 1},
        "data": [
            {"timestamp": "2018-05-15T18:00:00.000000", "price": "205000", "amount": "0.5"},
            {"timestamp": "2018-05-15T17:59:00.000000", "price": "204500", "amount": "1.2"},
            {"timestamp": "2018-05-15T17:58:00.000000", "price": "204000", "amount": "3.0"},
        ],
    }


@pytest.fixture
def sample_trades_response():
    """Sample trades response, newest first."""
    return {
        "status": "success",
        "pagination": {"previous": "null", "limit": 20, "page": 0, "next": "null"},
        "data": [
            {
                "market_taker": "sell",
                "timestamp": "2018-05-16T10:00:00.000000",
                "price": "206000",
                "amount": "0.1",
                "market": "ETHCLP",
            },
            {
                "market_taker": "buy",
                "timestamp": "2018-05-15T09:30:00.000000",
                "price": "205000",
                "amount": "0.4",
                "market": "ETHCLP",
            },
            {
                "market_taker": "buy",
                "timestamp": "2018-05-15T12:45:00.000000",
                "price": "205500",
                "amount": "0.2",
                "market": "ETHCLP",
            },
        ],
    }


@pytest.fixture
def sample_order_response():
    """Sample order response."""
    return {
        "status": "success",
        "data": {
            "id": "M103975",
            "status": "active",
            "type": "buy",
            "price": "10000",
            "amount": {"original": "0.3", "remaining": "0.3", "executed": "0"},
            "market": "ETHCLP",
            "created_at": "2018-05-15T18:02:00.000000",
            "updated_at": "2018-05-15T18:02:00.000000",
            "execution_price": None,
            "avg_execution_price": 0,
        },
    }


@pytest.fixture
def sample_balance_response():
    """Sample balance response."""
    return {
        "status": "success",
        "data": [
            {"available": "120347", "wallet": "CLP", "balance": "120347"},
            {"available": "10.3399", "wallet": "ETH", "balance": "11.3399"},
        ],
    }


@pytest.fixture
def sample_payment_response():
    """Sample payment order response."""
    return {
        "status": "success",
        "data": {
            "id": "P13433",
            "external_id": "ABC123",
            "status": 0,
            "to_receive": "3000",
            "to_receive_currency": "CLP",
            "expected_amount": "0.0148",
            "expected_currency": "ETH",
            "deposit_address": "0x55f3396d0b39f31fc3b8c1d6f9f9e7f1f2b6e1f0",
            "refund_email": "refund@example.com",
            "qr": "https://api.cryptomkt.com/qr/P13433.png",
            "payment_url": "https://payment.cryptomkt.com/P13433",
            "created_at": "2018-05-15T18:02:00.000000",
            "updated_at": "2018-05-15T18:02:00.000000",
        },
    }
