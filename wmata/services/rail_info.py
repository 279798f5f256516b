"""Rail Station Information API.

Documentation: https://developer.wmata.com/docs/services/5476364f031f590f38092507
"""

from __future__ import annotations

from wmata.models.lines import LineCode, parse_line_code
from wmata.models.rail_info import (
    GetLinesResponse,
    GetParkingInformationResponse,
    GetPathBetweenStationsResponse,
    GetStationEntrancesResponse,
    GetStationInformationResponse,
    GetStationListResponse,
    GetStationTimingsResponse,
    GetStationToStationInformationResponse,
    StationEntrancesRequest,
)
from wmata.services.wmata_service import WMATAService, format_float, require


class RailStationInfoService(WMATAService):
    """Lines, stations, parking, entrances, paths and fares for Metrorail."""

    base_path = "/Rail.svc"

    def get_lines(self) -> GetLinesResponse:
        url = self.endpoint_url("/json/jLines", "/Lines")
        return self._get(url, None, GetLinesResponse)

    def get_parking_information(
        self, station_code: str = ""
    ) -> GetParkingInformationResponse:
        """Parking at one station, or at every station when no code is given."""
        url = self.endpoint_url("/json/jStationParking", "/StationParking")
        params = {"StationCode": station_code} if station_code else None
        return self._get(url, params, GetParkingInformationResponse)

    def get_path_between_stations(
        self, from_station: str, to_station: str
    ) -> GetPathBetweenStationsResponse:
        """Ordered stations between two stations on the same line."""
        params = {
            "FromStationCode": require("from_station", from_station),
            "ToStationCode": require("to_station", to_station),
        }
        url = self.endpoint_url("/json/jPath", "/Path")
        return self._get(url, params, GetPathBetweenStationsResponse)

    def get_station_entrances(
        self, request: StationEntrancesRequest | None = None
    ) -> GetStationEntrancesResponse:
        """Station entrances within a radius (meters), or all entrances."""
        params = None
        if request is not None:
            params = {
                "Lat": format_float(request.latitude),
                "Lon": format_float(request.longitude),
                "Radius": format_float(request.radius),
            }
        url = self.endpoint_url("/json/jStationEntrances", "/StationEntrances")
        return self._get(url, params, GetStationEntrancesResponse)

    def get_station_information(
        self, station_code: str
    ) -> GetStationInformationResponse:
        params = {"StationCode": require("station_code", station_code)}
        url = self.endpoint_url("/json/jStationInfo", "/StationInfo")
        return self._get(url, params, GetStationInformationResponse)

    def get_station_list(
        self, line_code: LineCode | str | None = None
    ) -> GetStationListResponse:
        """Stations on a line, or every station when no line is given.

        Raises:
            ValueError: If ``line_code`` names no Metrorail line
        """
        if isinstance(line_code, str) and not isinstance(line_code, LineCode):
            line_code = parse_line_code(line_code)
        params = {"LineCode": line_code.value} if line_code else None
        url = self.endpoint_url("/json/jStations", "/Stations")
        return self._get(url, params, GetStationListResponse)

    def get_station_timings(self, station_code: str = "") -> GetStationTimingsResponse:
        """Opening, first and last train times per weekday."""
        params = {"StationCode": station_code} if station_code else None
        url = self.endpoint_url("/json/jStationTimes", "/StationTimes")
        return self._get(url, params, GetStationTimingsResponse)

    def get_station_to_station_information(
        self, from_station: str = "", to_station: str = ""
    ) -> GetStationToStationInformationResponse:
        """Distance, fare and travel time between stations.

        Omitting either station returns every pair from (or to) the other.
        """
        params: dict[str, str] = {}
        if from_station:
            params["FromStationCode"] = from_station
        if to_station:
            params["ToStationCode"] = to_station
        url = self.endpoint_url(
            "/json/jSrcStationToDstStationInfo", "/SrcStationToDstStationInfo"
        )
        return self._get(url, params, GetStationToStationInformationResponse)


__all__ = ["RailStationInfoService"]
