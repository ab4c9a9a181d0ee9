"""Credentials and request signing."""

from __future__ import annotations

import hashlib
import hmac
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

API_KEY_HEADER = "X-MKT-APIKEY"
SIGNATURE_HEADER = "X-MKT-SIGNATURE"
TIMESTAMP_HEADER = "X-MKT-TIMESTAMP"


@dataclass(frozen=True)
class Credentials:
    """API key/secret pair. Immutable and safe to share across requests."""

    api_key: str
    api_secret: str = field(repr=False)


class NonceGenerator:
    """Issues Unix-second timestamps that never repeat or go backwards.

    A burst of N signed calls within one second pushes the nonce up to
    N - 1 seconds ahead of the clock; it falls back to the clock once the
    burst ends. The exchange may reject timestamps too far in the future.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            nonce = max(int(self._clock()), self._last + 1)
            self._last = nonce
            return nonce


def generate_signature(secret: str, message: str) -> str:
    """Hex-encoded HMAC-SHA384 of message keyed by secret."""
    return hmac.new(secret.encode(), message.encode(), hashlib.sha384).hexdigest()


def build_signature_message(
    nonce: int | str,
    path: str,
    payload: Mapping[str, str] | None = None,
    *,
    method: str = "GET",
) -> str:
    """Build the canonical message for a request.

    The message is the nonce followed by the request path. For POST requests
    the body values are appended in ascending key order, e.g.
    ``"1526400000/v1/orders/create" + "0.3" + "ETHCLP" + "10000" + "buy"``.
    """
    message = f"{nonce}{path}"
    if method.upper() != "GET" and payload:
        message += "".join(str(payload[key]) for key in sorted(payload))
    return message


class Signer:
    """Builds authentication headers for a credential pair."""

    def __init__(self, credentials: Credentials, nonce: NonceGenerator | None = None):
        self.credentials = credentials
        self.nonce = nonce or NonceGenerator()

    def sign(
        self,
        method: str,
        path: str,
        payload: Mapping[str, str] | None = None,
        *,
        nonce: int | str,
    ) -> str:
        message = build_signature_message(nonce, path, payload, method=method)
        return generate_signature(self.credentials.api_secret, message)

    def headers(
        self,
        method: str,
        path: str,
        payload: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        nonce = self.nonce()
        return {
            API_KEY_HEADER: self.credentials.api_key,
            SIGNATURE_HEADER: self.sign(method, path, payload, nonce=nonce),
            TIMESTAMP_HEADER: str(nonce),
        }
