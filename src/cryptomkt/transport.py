"""HTTP transport for the CryptoMarket API."""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Protocol

import aiohttp

from .errors import DecodeError, NetworkError, error_from_status

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "cryptomkt-python/0.3"


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


class HttpRequest(Protocol):
    """Anything able to issue GET and POST requests and return the body text."""

    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        """Issue a GET request.

        Args:
            url: Full URL including the query string
            headers: Request headers

        Returns:
            Response body of a 200 response
        """
        ...

    async def post(self, url: str, headers: Mapping[str, str], payload: Mapping[str, str]) -> str:
        """Issue a form-encoded POST request.

        Args:
            url: Full URL
            headers: Request headers
            payload: Form fields to send

        Returns:
            Response body of a 200 response
        """
        ...

    async def close(self) -> None:
        """Release the underlying connections."""
        ...


class AiohttpTransport:
    """aiohttp-backed transport.

    The session is created on first use, so constructing a transport
    performs no I/O.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        proxy: ProxyConfig | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.proxy = proxy or ProxyConfig()
        self.user_agent = user_agent
        self.session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            # total=None disables aiohttp's own 5 minute default
            self.session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(),
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
            )
        return self.session

    async def get(self, url: str, headers: Mapping[str, str]) -> str:
        session = await self._ensure_session()
        return await self._send("GET", session.get, url, headers=dict(headers))

    async def post(self, url: str, headers: Mapping[str, str], payload: Mapping[str, str]) -> str:
        session = await self._ensure_session()
        return await self._send("POST", session.post, url, headers=dict(headers), data=dict(payload))

    async def _send(self, method: str, request, url: str, **kwargs) -> str:
        proxy = self.proxy.proxy_url
        if proxy:
            kwargs["proxy"] = proxy

        try:
            async with request(url, **kwargs) as resp:
                body = await resp.text()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("%s %s failed: %r", method, url, e)
            raise NetworkError(f"{method} {url} failed: {e!r}") from e
        except UnicodeDecodeError as e:
            logger.error("%s %s: undecodable body: %s", method, url, e)
            raise DecodeError(f"{method} {url} returned an undecodable body") from e

        if status != 200:
            logger.error("%s %s: StatusCode %s", method, url, status)
            raise error_from_status(status, body)
        return body

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None
