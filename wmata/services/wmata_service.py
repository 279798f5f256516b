"""Shared plumbing for the per-API WMATA services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from wmata.core.constants import ResponseFormat
from wmata.models.base import WMATAResponse
from wmata.services.wmata_client import WMATAClient
from wmata.services.wmata_errors import MissingParameterError

ResponseT = TypeVar("ResponseT", bound=WMATAResponse)


def format_float(value: float) -> str:
    """Shortest round-trip text for ``value``; integral values drop the fraction."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def require(parameter: str, value: str | None) -> str:
    """Return ``value`` or raise MissingParameterError when it is empty."""
    if not value:
        raise MissingParameterError(parameter)
    return value


class WMATAService:
    """Base for services that pick a JSON or XML endpoint per instance."""

    base_path: str = ""

    def __init__(
        self,
        client: WMATAClient,
        response_format: ResponseFormat | str = ResponseFormat.JSON,
    ) -> None:
        self._client = client
        self._response_format = ResponseFormat.parse(response_format)

    @property
    def client(self) -> WMATAClient:
        return self._client

    @property
    def response_format(self) -> ResponseFormat:
        return self._response_format

    def endpoint_url(self, json_path: str, xml_path: str) -> str:
        """Full URL of an operation for the configured response format."""
        if self._response_format is ResponseFormat.XML:
            path = xml_path
        else:
            path = json_path
        return f"{self._client.base_url}{self.base_path}{path}"

    def _get(
        self,
        url: str,
        query_params: Mapping[str, str] | None,
        response_model: type[ResponseT],
        *,
        endpoint: str | None = None,
    ) -> ResponseT:
        return self._client.send(
            self._response_format,
            url,
            query_params,
            response_model,
            endpoint=endpoint,
        )


__all__ = ["WMATAService", "format_bool", "format_float", "require"]
