"""Records for the Rail Station Information API (Rail.svc)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


@dataclass(frozen=True)
class StationEntrancesRequest:
    """Search area for station entrances."""

    latitude: float
    longitude: float
    radius: float


class Line(WMATAModel):
    display_name: str | None = Field(None, alias="DisplayName")
    end_station_code: str | None = Field(None, alias="EndStationCode")
    internal_destination1: str | None = Field(None, alias="InternalDestination1")
    internal_destination2: str | None = Field(None, alias="InternalDestination2")
    line_code: str | None = Field(None, alias="LineCode")
    start_station_code: str | None = Field(None, alias="StartStationCode")


class GetLinesResponse(WMATAResponse):
    xml_root = "LinesResp"

    lines: list[Line] = Field(default_factory=list, alias="Lines")


class AllDayParking(WMATAModel):
    total_count: int | None = Field(None, alias="TotalCount")
    rider_cost: float | None = Field(None, alias="RiderCost")
    non_rider_cost: float | None = Field(None, alias="NonRiderCost")
    saturday_rider_cost: float | None = Field(None, alias="SaturdayRiderCost")
    saturday_non_rider_cost: float | None = Field(
        None, alias="SaturdayNonRiderCost"
    )


class ShortTermParking(WMATAModel):
    total_count: int | None = Field(None, alias="TotalCount")
    notes: str | None = Field(None, alias="Notes")


class StationParking(WMATAModel):
    station_code: str | None = Field(None, alias="Code")
    notes: str | None = Field(None, alias="Notes")
    all_day: AllDayParking | None = Field(None, alias="AllDayParking")
    short_term: ShortTermParking | None = Field(None, alias="ShortTermParking")


class GetParkingInformationResponse(WMATAResponse):
    xml_root = "StationParkingResp"

    parking_information: list[StationParking] = Field(
        default_factory=list, alias="StationsParking"
    )


class PathItem(WMATAModel):
    distance_to_previous_station: int | None = Field(None, alias="DistanceToPrev")
    line_code: str | None = Field(None, alias="LineCode")
    sequence_number: int | None = Field(None, alias="SeqNum")
    station_code: str | None = Field(None, alias="StationCode")
    station_name: str | None = Field(None, alias="StationName")


class GetPathBetweenStationsResponse(WMATAResponse):
    xml_root = "PathResp"

    path: list[PathItem] = Field(default_factory=list, alias="Path")


class StationEntrance(WMATAModel):
    description: str | None = Field(None, alias="Description")
    # Deprecated by WMATA.
    id: str | None = Field(None, alias="ID")
    latitude: float | None = Field(None, alias="Lat")
    longitude: float | None = Field(None, alias="Lon")
    name: str | None = Field(None, alias="Name")
    station_code1: str | None = Field(None, alias="StationCode1")
    station_code2: str | None = Field(None, alias="StationCode2")


class GetStationEntrancesResponse(WMATAResponse):
    xml_root = "StationEntrancesResp"

    entrances: list[StationEntrance] = Field(default_factory=list, alias="Entrances")


class StationAddress(WMATAModel):
    city: str | None = Field(None, alias="City")
    state: str | None = Field(None, alias="State")
    street: str | None = Field(None, alias="Street")
    zip: str | None = Field(None, alias="Zip")


class StationListItem(WMATAModel):
    address: StationAddress | None = Field(None, alias="Address")
    station_code: str | None = Field(None, alias="Code")
    latitude: float | None = Field(None, alias="Lat")
    line_code1: str | None = Field(None, alias="LineCode1")
    line_code2: str | None = Field(None, alias="LineCode2")
    line_code3: str | None = Field(None, alias="LineCode3")
    line_code4: str | None = Field(None, alias="LineCode4")
    longitude: float | None = Field(None, alias="Lon")
    name: str | None = Field(None, alias="Name")
    station_together1: str | None = Field(None, alias="StationTogether1")
    station_together2: str | None = Field(None, alias="StationTogether2")


class GetStationInformationResponse(StationListItem, WMATAResponse):
    xml_root = "Station"


class GetStationListResponse(WMATAResponse):
    xml_root = "StationsResp"

    stations: list[StationListItem] = Field(default_factory=list, alias="Stations")


class StationTrainInformation(WMATAModel):
    time: str | None = Field(None, alias="Time")
    destination_station: str | None = Field(None, alias="DestinationStation")


class StationDayItem(WMATAModel):
    opening_time: str | None = Field(None, alias="OpeningTime")
    first_trains: list[StationTrainInformation] = Field(
        default_factory=list, alias="FirstTrains"
    )
    last_trains: list[StationTrainInformation] = Field(
        default_factory=list, alias="LastTrains"
    )


class StationTime(WMATAModel):
    station_code: str | None = Field(None, alias="Code")
    station_name: str | None = Field(None, alias="StationName")
    monday: StationDayItem | None = Field(None, alias="Monday")
    tuesday: StationDayItem | None = Field(None, alias="Tuesday")
    wednesday: StationDayItem | None = Field(None, alias="Wednesday")
    thursday: StationDayItem | None = Field(None, alias="Thursday")
    friday: StationDayItem | None = Field(None, alias="Friday")
    saturday: StationDayItem | None = Field(None, alias="Saturday")
    sunday: StationDayItem | None = Field(None, alias="Sunday")


class GetStationTimingsResponse(WMATAResponse):
    xml_root = "StationTimeResp"

    station_times: list[StationTime] = Field(
        default_factory=list, alias="StationTimes"
    )


class RailFare(WMATAModel):
    off_peak_time: float | None = Field(None, alias="OffPeakTime")
    peak_time: float | None = Field(None, alias="PeakTime")
    senior_disabled: float | None = Field(None, alias="SeniorDisabled")


class StationToStation(WMATAModel):
    composite_miles: float | None = Field(None, alias="CompositeMiles")
    destination_station: str | None = Field(None, alias="DestinationStation")
    fare: RailFare | None = Field(None, alias="RailFare")
    time: int | None = Field(None, alias="RailTime")
    source_station: str | None = Field(None, alias="SourceStation")


class GetStationToStationInformationResponse(WMATAResponse):
    xml_root = "StationToStationInfoResp"

    station_to_station_information: list[StationToStation] = Field(
        default_factory=list, alias="StationToStationInfos"
    )


__all__ = [
    "StationEntrancesRequest",
    "Line",
    "GetLinesResponse",
    "AllDayParking",
    "ShortTermParking",
    "StationParking",
    "GetParkingInformationResponse",
    "PathItem",
    "GetPathBetweenStationsResponse",
    "StationEntrance",
    "GetStationEntrancesResponse",
    "StationAddress",
    "StationListItem",
    "GetStationInformationResponse",
    "GetStationListResponse",
    "StationTrainInformation",
    "StationDayItem",
    "StationTime",
    "GetStationTimingsResponse",
    "RailFare",
    "StationToStation",
    "GetStationToStationInformationResponse",
]
