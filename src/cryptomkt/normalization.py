"""Market name normalization."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

QUOTE_CURRENCIES = {"CLP", "ARS", "BRL", "EUR", "MXN", "USDC", "USDT"}


def normalize_market(name: str) -> str:
    """Normalize a market name to the exchange format.

    - ETHCLP -> ETHCLP
    - eth-clp -> ETHCLP
    - ETH/CLP -> ETHCLP
    """
    if not name:
        return name
    return name.strip().replace("-", "").replace("/", "").replace(" ", "").upper()


def split_market(name: str) -> tuple[str, str]:
    """Split a market name into (base, quote) currencies.

    Handles separated names (ETH-CLP, ETH/CLP) and joined names whose
    quote is a known currency (ETHCLP). Returns (name, '') when the quote
    cannot be determined.
    """
    if not name:
        return "", ""

    name = name.strip().upper()

    for sep in ("-", "/"):
        if sep in name:
            parts = name.split(sep)
            if len(parts) == 2:
                return parts[0].strip(), parts[1].strip()

    for quote in sorted(QUOTE_CURRENCIES, key=len, reverse=True):
        if name.endswith(quote):
            base = name[: -len(quote)]
            if base:
                return base, quote

    logger.debug("Could not determine quote currency of %s", name)
    return name, ""
