"""Synchronous HTTP client for the WMATA API.

Every WMATA service funnels through :meth:`WMATAClient.send`, which issues a
single GET with the ``api_key`` header and decodes the body into the
requested record type.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TypeVar

import httpx

from wmata.core.config import Settings, get_settings
from wmata.core.constants import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ResponseFormat,
)
from wmata.core.metrics import observe_wmata_request
from wmata.models.base import WMATAResponse
from wmata.services.wmata_decoding import decode_body
from wmata.services.wmata_errors import APIKeyValidationError, DecodeError

logger = logging.getLogger(__name__)

VALIDATE_PATH = "/Misc/Validate"

ResponseT = TypeVar("ResponseT", bound=WMATAResponse)


def close_response(response: httpx.Response) -> None:
    """Close a response body, logging instead of raising on failure."""
    try:
        response.close()
    except (httpx.HTTPError, OSError) as exc:
        logger.warning("Error closing response body: %s", exc)


class WMATAClient:
    """WMATA-specific HTTP client that carries the authentication key."""

    def __init__(
        self,
        api_key: str,
        http_client: httpx.Client | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: WMATA subscription key sent with every request
            http_client: Optional transport; a client with ``timeout`` is
                created when omitted
            base_url: Root URL that service paths are appended to
            timeout: Timeout in seconds for the default transport
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http_client = (
            http_client if http_client is not None else httpx.Client(timeout=timeout)
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "WMATAClient":
        """Build a client with a default transport from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.wmata_api_key,
            base_url=settings.wmata_base_url,
            timeout=settings.wmata_timeout_seconds,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "WMATAClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _build_request(
        self, url: str, query_params: Mapping[str, str] | None
    ) -> httpx.Request:
        params = dict(sorted(query_params.items())) if query_params else None
        return self._http_client.build_request(
            "GET", url, params=params, headers={API_KEY_HEADER: self._api_key}
        )

    def send(
        self,
        response_format: ResponseFormat | str,
        url: str,
        query_params: Mapping[str, str] | None,
        response_model: type[ResponseT],
        *,
        endpoint: str | None = None,
    ) -> ResponseT:
        """Send a GET request to ``url`` and decode the body into ``response_model``.

        Args:
            response_format: Decoder to apply to the body
            url: Fully-qualified endpoint URL, format suffix included
            query_params: Query string parameters; None or empty sends none
            response_model: Record type describing a successful response
            endpoint: Metrics label; defaults to the URL path

        Returns:
            The decoded record

        Raises:
            httpx.RequestError: The request could not be completed
            httpx.HTTPStatusError: WMATA answered with a non-2xx status
            DecodeError: The body does not match ``response_model``
        """
        response_format = ResponseFormat.parse(response_format)
        request = self._build_request(url, query_params)
        endpoint = endpoint or request.url.path

        logger.debug("GET %s", request.url)
        start = time.perf_counter()
        try:
            response = self._http_client.send(request, stream=True)
            try:
                body = response.read()
                response.raise_for_status()
            finally:
                close_response(response)
        except httpx.HTTPError:
            observe_wmata_request(endpoint, "error", time.perf_counter() - start)
            raise

        try:
            result = decode_body(response_format, body, response_model)
        except DecodeError as exc:
            exc.url = str(request.url)
            logger.warning(
                "Failed to decode %s response from %s: %s",
                response_format.value,
                request.url,
                exc,
            )
            observe_wmata_request(
                endpoint, "decode_error", time.perf_counter() - start
            )
            raise

        observe_wmata_request(endpoint, "success", time.perf_counter() - start)
        return result

    def validate_api_key(self) -> int:
        """Check that WMATA accepts the configured API key.

        Returns:
            The HTTP status code (200) of the validation request

        Raises:
            APIKeyValidationError: WMATA answered with any other status
            httpx.RequestError: The request could not be completed
        """
        request = self._build_request(f"{self._base_url}{VALIDATE_PATH}", None)
        response = self._http_client.send(request, stream=True)
        try:
            body = response.read()
        finally:
            close_response(response)

        if response.status_code != httpx.codes.OK:
            raise APIKeyValidationError(
                response.status_code, body.decode("utf-8", errors="replace")
            )
        return response.status_code


__all__ = [
    "WMATAClient",
    "close_response",
    "VALIDATE_PATH",
]
