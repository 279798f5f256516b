"""WMATA-specific exception definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wmata.core.constants import ResponseFormat


class WMATAError(Exception):
    """Base class for errors raised by the WMATA client."""


class MissingParameterError(WMATAError, ValueError):
    """Raised before any request is sent when a required argument is empty."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"{parameter} is required")
        self.parameter = parameter


class DecodeError(WMATAError):
    """Raised when a response body cannot be decoded into the expected record."""

    def __init__(
        self,
        message: str,
        *,
        response_format: ResponseFormat | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.response_format = response_format
        self.url = url


class APIKeyValidationError(WMATAError):
    """Raised when WMATA rejects the configured API key."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "WMATAError",
    "MissingParameterError",
    "DecodeError",
    "APIKeyValidationError",
]
