"""Records for the Train Positions API (TrainPositions)."""

from __future__ import annotations

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


class TrainPosition(WMATAModel):
    car_count: int | None = Field(None, alias="CarCount")
    circuit_id: int | None = Field(None, alias="CircuitId")
    destination_station_code: str | None = Field(
        None, alias="DestinationStationCode"
    )
    direction_number: int | None = Field(None, alias="DirectionNum")
    line_code: str | None = Field(None, alias="LineCode")
    seconds_at_location: int | None = Field(None, alias="SecondsAtLocation")
    service_type: str | None = Field(None, alias="ServiceType")
    train_id: str | None = Field(None, alias="TrainId")
    train_number: str | None = Field(None, alias="TrainNumber")


class GetLiveTrainPositionsResponse(WMATAResponse):
    xml_root = "TrainPositionResp"

    positions: list[TrainPosition] = Field(
        default_factory=list, alias="TrainPositions"
    )


class StandardTrackCircuit(WMATAModel):
    circuit_id: int | None = Field(None, alias="CircuitId")
    sequence_number: int | None = Field(None, alias="SeqNum")
    station_code: str | None = Field(None, alias="StationCode")


class StandardRoute(WMATAModel):
    line_code: str | None = Field(None, alias="LineCode")
    track_number: int | None = Field(None, alias="TrackNum")
    track_circuits: list[StandardTrackCircuit] = Field(
        default_factory=list, alias="TrackCircuits"
    )


class GetStandardRoutesResponse(WMATAResponse):
    xml_root = "StandardRouteResp"

    routes: list[StandardRoute] = Field(default_factory=list, alias="StandardRoutes")


class Neighbor(WMATAModel):
    circuit_ids: list[int] = Field(default_factory=list, alias="CircuitIds")
    neighbor_type: str | None = Field(None, alias="NeighborType")


class TrackCircuit(WMATAModel):
    circuit_id: int | None = Field(None, alias="CircuitId")
    track: int | None = Field(None, alias="Track")
    neighbors: list[Neighbor] = Field(default_factory=list, alias="Neighbors")


class GetTrackCircuitsResponse(WMATAResponse):
    xml_root = "TrackCircuitResp"

    track_circuits: list[TrackCircuit] = Field(
        default_factory=list, alias="TrackCircuits"
    )


__all__ = [
    "TrainPosition",
    "GetLiveTrainPositionsResponse",
    "StandardTrackCircuit",
    "StandardRoute",
    "GetStandardRoutesResponse",
    "Neighbor",
    "TrackCircuit",
    "GetTrackCircuitsResponse",
]
