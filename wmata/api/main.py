"""
Demo HTTP server on top of the WMATA client.

Proxies the station list and next-train predictions as WMATA-shaped JSON:

    GET /StationList?MetroLine=RD
    GET /GetTrainPredictions?StationCode=A01

Run with ``uvicorn wmata.api.main:app --port 8080``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from wmata.api.metrics import router as metrics_router
from wmata.core.config import get_settings
from wmata.core.log_config import configure_logging
from wmata.models.base import WMATAResponse
from wmata.models.lines import parse_line_code
from wmata.services.rail_info import RailStationInfoService
from wmata.services.rail_predictions import RailPredictionsService
from wmata.services.wmata_client import WMATAClient
from wmata.services.wmata_errors import WMATAError

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "error processing request"

router = APIRouter()


def get_wmata_client() -> Iterator[WMATAClient]:
    """Yield a client built from settings, closed after the request."""
    with WMATAClient.from_settings() as client:
        yield client


def get_rail_info_service(
    client: WMATAClient = Depends(get_wmata_client),
) -> RailStationInfoService:
    return RailStationInfoService(client, get_settings().wmata_response_format)


def get_rail_predictions_service(
    client: WMATAClient = Depends(get_wmata_client),
) -> RailPredictionsService:
    return RailPredictionsService(client, get_settings().wmata_response_format)


def _json_response(record: WMATAResponse) -> JSONResponse:
    return JSONResponse(record.model_dump(mode="json", by_alias=True))


def _error_response(context: str, exc: Exception) -> Response:
    logger.error("error retrieving %s: %s", context, exc)
    return PlainTextResponse(ERROR_MESSAGE, status_code=500)


@router.get("/health")
def healthcheck() -> dict[str, str]:
    """Lightweight readiness probe."""
    return {"status": "ok"}


@router.get("/StationList")
def station_list(
    metro_line: Annotated[
        str,
        Query(alias="MetroLine", description="Line code or name; all lines when empty."),
    ] = "",
    service: RailStationInfoService = Depends(get_rail_info_service),
) -> Response:
    """Stations on a Metrorail line."""
    try:
        line_code = parse_line_code(metro_line)
    except ValueError as exc:
        return PlainTextResponse(str(exc), status_code=400)

    try:
        stations = service.get_station_list(line_code)
    except (httpx.HTTPError, WMATAError) as exc:
        return _error_response("station information", exc)
    return _json_response(stations)


@router.get("/GetTrainPredictions")
def train_predictions(
    station_code: Annotated[
        str,
        Query(alias="StationCode", description="Station code; all stations when empty."),
    ] = "",
    service: RailPredictionsService = Depends(get_rail_predictions_service),
) -> Response:
    """Next trains arriving at a station."""
    try:
        trains = service.get_next_trains([station_code])
    except (httpx.HTTPError, WMATAError) as exc:
        return _error_response("train predictions", exc)
    return _json_response(trains)


def _install_request_logging_middleware(app: FastAPI) -> None:
    """Log every inbound request as ``[METHOD] [URL]``."""

    @app.middleware("http")
    async def log_request(request: Request, call_next: Any):
        logger.info("[%s] [%s]", request.method, request.url)
        return await call_next(request)


def create_app() -> FastAPI:
    """Application factory for FastAPI."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="WMATA Demo API",
        description="Station list and rail predictions proxied from the WMATA API.",
        version="0.1.0",
    )
    _install_request_logging_middleware(app)

    app.include_router(metrics_router)
    app.include_router(router)

    return app


app = create_app()
