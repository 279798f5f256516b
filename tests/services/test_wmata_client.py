"""Unit tests for the WMATA request dispatcher."""

from __future__ import annotations

import logging

import httpx
import pytest
from prometheus_client import CollectorRegistry, Counter, Histogram

import wmata.core.metrics as metrics
from tests.conftest import TEST_API_KEY, TEST_BASE_URL
from tests.fixtures import wmata_payloads as payloads
from wmata.core.config import Settings
from wmata.core.constants import ResponseFormat
from wmata.models.rail_info import GetLinesResponse
from wmata.services import wmata_client as wmata_client_module
from wmata.services.wmata_client import WMATAClient, close_response
from wmata.services.wmata_errors import APIKeyValidationError, DecodeError

LINES_URL = f"{TEST_BASE_URL}/Rail.svc/json/jLines"


@pytest.fixture
def metric_registry(monkeypatch):
    registry = CollectorRegistry()
    monkeypatch.setattr(
        metrics,
        "WMATA_REQUESTS",
        Counter(
            "wmata_requests_total",
            "WMATA requests",
            ["endpoint", "result"],
            registry=registry,
        ),
    )
    monkeypatch.setattr(
        metrics,
        "WMATA_REQUEST_LATENCY",
        Histogram(
            "wmata_request_seconds",
            "WMATA request latency",
            ["endpoint"],
            registry=registry,
        ),
    )
    return registry


class TestSend:
    def test_attaches_api_key_header(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", payloads.LINES_JSON)

        wmata_client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert transport.last_request.headers["api_key"] == TEST_API_KEY
        assert transport.last_request.method == "GET"

    def test_without_params_sends_no_query(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", payloads.LINES_JSON)

        wmata_client.send(ResponseFormat.JSON, LINES_URL, {}, GetLinesResponse)

        assert transport.last_request.url.query == b""

    def test_encodes_every_param_in_sorted_order(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", payloads.LINES_JSON)

        wmata_client.send(
            ResponseFormat.JSON,
            LINES_URL,
            {"ToStationCode": "B04", "FromStationCode": "A09", "Note": "a&b"},
            GetLinesResponse,
        )

        request = transport.last_request
        assert request.url.query == (
            b"FromStationCode=A09&Note=a%26b&ToStationCode=B04"
        )
        assert dict(request.url.params) == {
            "FromStationCode": "A09",
            "Note": "a&b",
            "ToStationCode": "B04",
        }

    def test_decodes_json_body(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", payloads.LINES_JSON)

        response = wmata_client.send(
            ResponseFormat.JSON, LINES_URL, None, GetLinesResponse
        )

        assert [line.line_code for line in response.lines] == [
            "BL",
            "GR",
            "OR",
            "RD",
            "SV",
            "YL",
        ]
        assert response.xml_name is None

    def test_accepts_string_format(self, wmata_client, transport):
        transport.add(
            "/Rail.svc/Lines", payloads.LINES_XML, content_type="application/xml"
        )

        response = wmata_client.send(
            "xml", f"{TEST_BASE_URL}/Rail.svc/Lines", None, GetLinesResponse
        )

        assert response.xml_name is not None
        assert response.xml_name.local == "LinesResp"

    def test_transport_error_propagates_after_single_attempt(self):
        calls: list[httpx.Request] = []

        def failing(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        client = WMATAClient(
            TEST_API_KEY,
            httpx.Client(transport=httpx.MockTransport(failing)),
            base_url=TEST_BASE_URL,
        )

        with pytest.raises(httpx.ConnectError):
            client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert len(calls) == 1

    def test_http_error_status_raises(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", '{"statusCode": 401}', status_code=401)

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            wmata_client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert exc_info.value.response.status_code == 401
        assert len(transport.requests) == 1

    def test_malformed_json_raises_decode_error(self, wmata_client, transport):
        transport.add("/Rail.svc/json/jLines", "{not json")

        with pytest.raises(DecodeError) as exc_info:
            wmata_client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert exc_info.value.response_format is ResponseFormat.JSON
        assert exc_info.value.url == LINES_URL

    def test_wrong_xml_root_raises_decode_error(self, wmata_client, transport):
        transport.add("/Rail.svc/Lines", payloads.PARKING_B08_XML)

        with pytest.raises(DecodeError):
            wmata_client.send(
                ResponseFormat.XML,
                f"{TEST_BASE_URL}/Rail.svc/Lines",
                None,
                GetLinesResponse,
            )

    def test_decode_failure_is_logged(self, wmata_client, transport, caplog):
        transport.add("/Rail.svc/json/jLines", "[]")

        with caplog.at_level(logging.WARNING, logger=wmata_client_module.__name__):
            with pytest.raises(DecodeError):
                wmata_client.send(
                    ResponseFormat.JSON, LINES_URL, None, GetLinesResponse
                )

        assert "Failed to decode json response" in caplog.text

    def test_records_metrics(self, wmata_client, transport, metric_registry):
        transport.add("/Rail.svc/json/jLines", payloads.LINES_JSON)

        wmata_client.send(
            ResponseFormat.JSON, LINES_URL, None, GetLinesResponse, endpoint="jLines"
        )

        assert (
            metric_registry.get_sample_value(
                "wmata_requests_total", {"endpoint": "jLines", "result": "success"}
            )
            == 1
        )

    def test_records_error_metric(self, wmata_client, transport, metric_registry):
        transport.add("/Rail.svc/json/jLines", "", status_code=500)

        with pytest.raises(httpx.HTTPStatusError):
            wmata_client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert (
            metric_registry.get_sample_value(
                "wmata_requests_total",
                {"endpoint": "/Rail.svc/json/jLines", "result": "error"},
            )
            == 1
        )


class TestCloseResponse:
    def test_close_failure_is_logged_not_raised(self, caplog):
        class BrokenResponse:
            def close(self) -> None:
                raise OSError("socket already closed")

        with caplog.at_level(logging.WARNING, logger=wmata_client_module.__name__):
            close_response(BrokenResponse())  # type: ignore[arg-type]

        assert "Error closing response body" in caplog.text

    def test_response_is_closed_after_send(self, wmata_client, transport, monkeypatch):
        closed: list[httpx.Response] = []
        original = wmata_client_module.close_response

        def tracking_close(response: httpx.Response) -> None:
            closed.append(response)
            original(response)

        monkeypatch.setattr(wmata_client_module, "close_response", tracking_close)
        transport.add("/Rail.svc/json/jLines", "", status_code=503)

        with pytest.raises(httpx.HTTPStatusError):
            wmata_client.send(ResponseFormat.JSON, LINES_URL, None, GetLinesResponse)

        assert len(closed) == 1
        assert closed[0].is_closed


class TestValidateAPIKey:
    def test_returns_status_on_success(self, wmata_client, transport):
        transport.add("/Misc/Validate", "")

        assert wmata_client.validate_api_key() == 200
        assert transport.last_request.headers["api_key"] == TEST_API_KEY

    def test_raises_with_status_and_body(self, wmata_client, transport):
        transport.add(
            "/Misc/Validate",
            '{"statusCode": 401, "message": "Access denied due to invalid subscription key."}',
            status_code=401,
        )

        with pytest.raises(APIKeyValidationError) as exc_info:
            wmata_client.validate_api_key()

        assert exc_info.value.status_code == 401
        assert "invalid subscription key" in str(exc_info.value)


class TestConstruction:
    def test_properties(self, wmata_client):
        assert wmata_client.api_key == TEST_API_KEY
        assert wmata_client.base_url == TEST_BASE_URL

    def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            WMATA_API_KEY="from-settings",
            WMATA_BASE_URL="https://example.test/",
            WMATA_TIMEOUT_SECONDS=12,
        )

        with WMATAClient.from_settings(settings) as client:
            assert client.api_key == "from-settings"
            assert client.base_url == "https://example.test"
            assert client.http_client.timeout.read == 12

    def test_close_leaves_injected_transport_open(self, transport):
        http_client = httpx.Client(transport=httpx.MockTransport(transport))

        with WMATAClient(TEST_API_KEY, http_client):
            pass

        assert not http_client.is_closed
        http_client.close()

    def test_close_releases_owned_transport(self):
        client = WMATAClient(TEST_API_KEY)
        client.close()

        assert client.http_client.is_closed
