"""Shared constants for the WMATA client.

This module defines the header, base URL and response format values used
across every WMATA service.
"""

from __future__ import annotations

import enum

API_KEY_HEADER = "api_key"
"""Header carrying the WMATA subscription key."""

DEFAULT_BASE_URL = "https://api.wmata.com"
"""Root of the public WMATA API."""

DEFAULT_TIMEOUT_SECONDS = 30.0
"""Timeout applied to the default HTTP transport."""

WMATA_XML_NAMESPACE = "http://www.wmata.com"
"""Namespace of the root element of every WMATA XML response."""


class ResponseFormat(str, enum.Enum):
    """Body format requested from WMATA."""

    JSON = "json"
    XML = "xml"

    @classmethod
    def parse(cls, value: "ResponseFormat | str") -> "ResponseFormat":
        """Normalise a member or a case-insensitive name to a ResponseFormat."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unsupported response format '{value}'.")


__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "WMATA_XML_NAMESPACE",
    "ResponseFormat",
]
