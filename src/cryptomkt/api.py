"""Request building, signing and response decoding shared by Client and Market."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping
from urllib.parse import urlencode

from pydantic import ValidationError

from .auth import Credentials, NonceGenerator, Signer
from .errors import ApiError, ApiErrorKind, DecodeError
from .models import ApiResponse
from .transport import AiohttpTransport, HttpRequest

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = "https://api.cryptomkt.com/"
DEFAULT_API_VERSION = "v1"


class CryptoMktApi:
    """Low-level access to the CryptoMarket REST API.

    One instance is shared by a Client and every Market it creates, so all
    of them use the same credentials, nonce sequence and HTTP session.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        domain: str = DEFAULT_DOMAIN,
        api_version: str = DEFAULT_API_VERSION,
        transport: HttpRequest | None = None,
        nonce: NonceGenerator | None = None,
    ):
        """Initialize the API.

        Args:
            api_key: CryptoMarket API key
            api_secret: CryptoMarket API secret
            domain: Base URL of the exchange
            api_version: API version prefix
            transport: Object issuing the HTTP requests (aiohttp by default)
            nonce: Nonce source for signed requests
        """
        self.credentials = Credentials(api_key, api_secret)
        self.signer = Signer(self.credentials, nonce)
        self.domain = domain if domain.endswith("/") else f"{domain}/"
        self.api_version = api_version.strip("/")
        self.transport = transport if transport is not None else AiohttpTransport()

    def path(self, endpoint: str) -> str:
        """Path of an endpoint as covered by the signature, e.g. /v1/orders/create."""
        return f"/{self.api_version}/{endpoint}"

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        url = f"{self.domain}{self.api_version}/{endpoint}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def build_headers(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, str] | None = None,
        *,
        public: bool = False,
    ) -> dict[str, str]:
        """Headers for a request; signed unless the endpoint is public."""
        if public:
            return {}
        return self.signer.headers(method, self.path(endpoint), payload)

    async def get(
        self,
        endpoint: str,
        data_type: Any,
        params: Mapping[str, Any] | None = None,
        *,
        public: bool = False,
    ) -> ApiResponse:
        params = {k: str(v) for k, v in (params or {}).items()}
        url = self.build_url(endpoint, params)
        headers = self.build_headers("GET", endpoint, params, public=public)
        logger.debug("GET %s (public=%s)", url, public)
        body = await self.transport.get(url, headers)
        return self.decode(body, data_type)

    async def post(self, endpoint: str, data_type: Any, payload: Mapping[str, Any]) -> ApiResponse:
        payload = {k: str(v) for k, v in payload.items()}
        url = self.build_url(endpoint)
        headers = self.build_headers("POST", endpoint, payload)
        logger.debug("POST %s fields=%s", url, sorted(payload))
        body = await self.transport.post(url, headers, payload)
        return self.decode(body, data_type)

    def decode(self, body: str, data_type: Any) -> ApiResponse:
        """Validate a response body into an envelope carrying ``data_type``.

        Raises:
            DecodeError: If the body is not JSON or does not match the schema
            ApiError: If the envelope reports an error
        """
        try:
            raw = json.loads(body)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Response is not valid JSON: {e}", body) from e

        if isinstance(raw, dict) and str(raw.get("status", "")).lower() == "error":
            message = raw.get("message") or raw.get("data") or ""
            raise ApiError(ApiErrorKind.REJECTED, str(message))

        try:
            envelope = ApiResponse[data_type].model_validate(raw)
        except ValidationError as e:
            logger.debug("Schema mismatch for %s: %s", data_type, e)
            raise DecodeError(f"Unexpected response schema: {e}", body) from e

        if envelope.data is None:
            raise DecodeError("Response has no data", body)
        return envelope

    async def close(self) -> None:
        await self.transport.close()
