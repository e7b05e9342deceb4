"""
Logging helpers for the Crypto Pay SDK.

The API key doubles as the webhook signing key material, so it must never
reach a log line in clear text. Modules log through ``get_logger(__name__)``
and pass tokens and headers through the masking helpers below.

Usage:
    from cryptopay.logging import get_logger, mask_headers

    logger = get_logger(__name__)
    logger.debug("Sending request headers=%s", mask_headers(headers))
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

MASK_PATTERN = "***"

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
    "crypto-pay-api-token",
    "x-crypto-pay-signature",
})


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``cryptopay`` namespace.

    A ``NullHandler`` is attached to the package root so applications that do
    not configure logging see no output from the SDK.
    """
    root = logging.getLogger("cryptopay")
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    if name != "cryptopay" and not name.startswith("cryptopay."):
        name = f"cryptopay.{name}"
    return logging.getLogger(name)


def mask_value(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a sensitive value, showing only its first and last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask sensitive HTTP headers.

    Args:
        headers: HTTP headers mapping

    Returns:
        Copy of the headers with sensitive values masked
    """
    result = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            result[key] = mask_value(value)
        else:
            result[key] = value
    return result
