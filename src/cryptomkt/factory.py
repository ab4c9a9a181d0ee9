"""Client construction from settings."""

from __future__ import annotations

import logging

from .client import Client
from .settings import Settings

logger = logging.getLogger(__name__)


def create_client_from_settings(settings: Settings) -> Client:
    """Create a Client configured from settings.

    Without credentials the client can still read public market data;
    authenticated calls will be rejected by the exchange.
    """
    if settings.credentials is None:
        logger.warning("No credentials configured, only public endpoints will work")
        api_key, api_secret = "", ""
    else:
        api_key = settings.credentials.api_key.get_secret_value()
        api_secret = settings.credentials.api_secret.get_secret_value()

    client = Client(api_key, api_secret, settings=settings)
    logger.info("Initialized client for %s%s", settings.base_url, settings.api_version)
    return client
