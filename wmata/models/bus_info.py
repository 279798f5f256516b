"""Records for the Bus Route and Stop Information API (Bus.svc)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


@dataclass(frozen=True)
class GetPositionsRequest:
    """Optional filters for bus positions; zero or empty values are not sent."""

    route_id: str = ""
    latitude: float = 0
    longitude: float = 0
    radius: float = 0


@dataclass(frozen=True)
class GetStopsRequest:
    """Optional search area for bus stops; zero values are not sent."""

    latitude: float = 0
    longitude: float = 0
    radius: float = 0


class BusPosition(WMATAModel):
    block_number: str | None = Field(None, alias="BlockNumber")
    date_time: str | None = Field(None, alias="DateTime")
    deviation: float | None = Field(None, alias="Deviation")
    # Deprecated by WMATA, use direction_text.
    direction_number: int | None = Field(None, alias="DirectionNum")
    direction_text: str | None = Field(None, alias="DirectionText")
    latitude: float | None = Field(None, alias="Lat")
    longitude: float | None = Field(None, alias="Lon")
    route_id: str | None = Field(None, alias="RouteID")
    trip_end_time: str | None = Field(None, alias="TripEndTime")
    trip_destination: str | None = Field(None, alias="TripHeadsign")
    trip_id: str | None = Field(None, alias="TripID")
    trip_start_time: str | None = Field(None, alias="TripStartTime")
    vehicle_id: str | None = Field(None, alias="VehicleID")


class GetPositionsResponse(WMATAResponse):
    xml_root = "BusPositionsResp"

    bus_positions: list[BusPosition] = Field(
        default_factory=list, alias="BusPositions"
    )


class ShapePoint(WMATAModel):
    latitude: float | None = Field(None, alias="Lat")
    longitude: float | None = Field(None, alias="Lon")
    sequence_number: int | None = Field(None, alias="SeqNum")


class Stop(WMATAModel):
    latitude: float | None = Field(None, alias="Lat")
    longitude: float | None = Field(None, alias="Lon")
    name: str | None = Field(None, alias="Name")
    routes: list[str] = Field(default_factory=list, alias="Routes")
    stop_id: str | None = Field(None, alias="StopID")


class Direction(WMATAModel):
    # Deprecated by WMATA, use direction_text.
    direction_number: str | None = Field(None, alias="DirectionNum")
    direction_text: str | None = Field(None, alias="DirectionText")
    shapes: list[ShapePoint] = Field(default_factory=list, alias="Shape")
    stops: list[Stop] = Field(default_factory=list, alias="Stops")
    trip_destination: str | None = Field(None, alias="TripHeadsign")


class GetRouteDetailsResponse(WMATAResponse):
    xml_root = "RouteDetailsInfo"

    direction0: Direction | None = Field(None, alias="Direction0")
    direction1: Direction | None = Field(None, alias="Direction1")
    name: str | None = Field(None, alias="Name")
    route_id: str | None = Field(None, alias="RouteID")


class Route(WMATAModel):
    name: str | None = Field(None, alias="Name")
    route_id: str | None = Field(None, alias="RouteID")
    line_description: str | None = Field(None, alias="LineDescription")


class GetRoutesResponse(WMATAResponse):
    xml_root = "RoutesResp"

    routes: list[Route] = Field(default_factory=list, alias="Routes")


class StopTime(WMATAModel):
    stop_id: str | None = Field(None, alias="StopID")
    stop_name: str | None = Field(None, alias="StopName")
    stop_sequence: int | None = Field(None, alias="StopSeq")
    time: str | None = Field(None, alias="Time")


class Trip(WMATAModel):
    direction_number: str | None = Field(None, alias="DirectionNum")
    end_time: str | None = Field(None, alias="EndTime")
    route_id: str | None = Field(None, alias="RouteID")
    start_time: str | None = Field(None, alias="StartTime")
    stop_times: list[StopTime] = Field(default_factory=list, alias="StopTimes")
    trip_direction: str | None = Field(None, alias="TripDirectionText")
    trip_destination: str | None = Field(None, alias="TripHeadsign")
    trip_id: str | None = Field(None, alias="TripID")


class GetScheduleResponse(WMATAResponse):
    xml_root = "RouteScheduleInfo"

    direction0: list[Trip] = Field(default_factory=list, alias="Direction0")
    direction1: list[Trip] = Field(default_factory=list, alias="Direction1")
    name: str | None = Field(None, alias="Name")


class ScheduleArrival(WMATAModel):
    direction_number: str | None = Field(None, alias="DirectionNum")
    end_time: str | None = Field(None, alias="EndTime")
    route_id: str | None = Field(None, alias="RouteID")
    schedule_time: str | None = Field(None, alias="ScheduleTime")
    start_time: str | None = Field(None, alias="StartTime")
    trip_direction: str | None = Field(None, alias="TripDirectionText")
    trip_destination: str | None = Field(None, alias="TripHeadsign")
    trip_id: str | None = Field(None, alias="TripID")


class GetScheduleAtStopResponse(WMATAResponse):
    xml_root = "StopScheduleInfo"

    schedule_arrivals: list[ScheduleArrival] = Field(
        default_factory=list, alias="ScheduleArrivals"
    )
    stop_info: Stop | None = Field(None, alias="Stop")


class GetStopsResponse(WMATAResponse):
    xml_root = "StopsResp"

    stops: list[Stop] = Field(default_factory=list, alias="Stops")


__all__ = [
    "GetPositionsRequest",
    "GetStopsRequest",
    "BusPosition",
    "GetPositionsResponse",
    "ShapePoint",
    "Stop",
    "Direction",
    "GetRouteDetailsResponse",
    "Route",
    "GetRoutesResponse",
    "StopTime",
    "Trip",
    "GetScheduleResponse",
    "ScheduleArrival",
    "GetScheduleAtStopResponse",
    "GetStopsResponse",
]
