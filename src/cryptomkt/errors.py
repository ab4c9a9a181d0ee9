"""Error types raised by the CryptoMarket client."""

from __future__ import annotations

import json
from enum import Enum


class CryptoMktError(Exception):
    """Base class for all client errors."""


class NetworkError(CryptoMktError):
    """Connection failure, DNS failure or timeout."""


class DecodeError(CryptoMktError):
    """Response body does not match the expected schema."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class InvalidArgument(CryptoMktError, ValueError):
    """Caller-supplied parameter violates a precondition."""


class ApiErrorKind(Enum):
    """Classification of errors reported by the exchange."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_ACCEPTABLE = "not_acceptable"
    GONE = "gone"
    TEAPOT = "teapot"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    REJECTED = "rejected"


_STATUS_KINDS: dict[int, ApiErrorKind] = {
    401: ApiErrorKind.UNAUTHORIZED,
    403: ApiErrorKind.FORBIDDEN,
    404: ApiErrorKind.NOT_FOUND,
    405: ApiErrorKind.METHOD_NOT_ALLOWED,
    406: ApiErrorKind.NOT_ACCEPTABLE,
    410: ApiErrorKind.GONE,
    418: ApiErrorKind.TEAPOT,
    429: ApiErrorKind.TOO_MANY_REQUESTS,
    500: ApiErrorKind.INTERNAL_SERVER_ERROR,
    503: ApiErrorKind.SERVICE_UNAVAILABLE,
}


class ApiError(CryptoMktError):
    """The exchange answered with an error.

    Attributes:
        kind: Error classification
        status: HTTP status code (None when the error came in a 200 envelope)
        message: Message reported by the exchange, if any
    """

    def __init__(self, kind: ApiErrorKind, message: str = "", *, status: int | None = None):
        text = f"{kind.value}: {message}" if message else kind.value
        if status is not None:
            text = f"HTTP {status} {text}"
        super().__init__(text)
        self.kind = kind
        self.status = status
        self.message = message


def extract_error_message(body: str) -> str:
    """Pull the exchange message out of an error body, if it has one."""
    try:
        payload = json.loads(body)
    except (TypeError, ValueError):
        return body.strip()[:200] if body else ""

    if isinstance(payload, dict):
        for key in ("message", "error", "data"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return ""


def error_from_status(status: int, body: str = "") -> ApiError:
    """Translate a non-200 HTTP status into an ApiError."""
    kind = _STATUS_KINDS.get(status, ApiErrorKind.BAD_REQUEST)
    return ApiError(kind, extract_error_message(body), status=status)
