"""Records for the Real-Time Bus Predictions API (NextBusService.svc)."""

from __future__ import annotations

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


class NextBusPrediction(WMATAModel):
    direction_number: str | None = Field(None, alias="DirectionNum")
    direction_text: str | None = Field(None, alias="DirectionText")
    minutes: int | None = Field(None, alias="Minutes")
    route_id: str | None = Field(None, alias="RouteID")
    trip_id: str | None = Field(None, alias="TripID")
    vehicle_id: str | None = Field(None, alias="VehicleID")


class GetNextBusResponse(WMATAResponse):
    xml_root = "NextBusResponse"

    predictions: list[NextBusPrediction] = Field(
        default_factory=list, alias="Predictions"
    )
    stop_name: str | None = Field(None, alias="StopName")


__all__ = ["NextBusPrediction", "GetNextBusResponse"]
