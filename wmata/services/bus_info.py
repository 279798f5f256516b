"""Bus Route and Stop Information API.

Documentation: https://developer.wmata.com/docs/services/54763629281d83086473f231
"""

from __future__ import annotations

from wmata.models.bus_info import (
    GetPositionsRequest,
    GetPositionsResponse,
    GetRouteDetailsResponse,
    GetRoutesResponse,
    GetScheduleAtStopResponse,
    GetScheduleResponse,
    GetStopsRequest,
    GetStopsResponse,
)
from wmata.services.wmata_service import (
    WMATAService,
    format_bool,
    format_float,
    require,
)


def _area_params(latitude: float, longitude: float, radius: float) -> dict[str, str]:
    params: dict[str, str] = {}
    if latitude:
        params["Lat"] = format_float(latitude)
    if longitude:
        params["Lon"] = format_float(longitude)
    if radius:
        params["Radius"] = format_float(radius)
    return params


class BusInfoService(WMATAService):
    base_path = "/Bus.svc"

    def get_positions(
        self, request: GetPositionsRequest | None = None
    ) -> GetPositionsResponse:
        """Bus positions, optionally filtered by route and search area."""
        params: dict[str, str] = {}
        if request is not None:
            if request.route_id:
                params["RouteID"] = request.route_id
            params.update(
                _area_params(request.latitude, request.longitude, request.radius)
            )
        url = self.endpoint_url("/json/jBusPositions", "/BusPositions")
        return self._get(url, params, GetPositionsResponse)

    def get_route_details(
        self, route_id: str, date: str = ""
    ) -> GetRouteDetailsResponse:
        """Shape and stops of a route in both directions.

        Args:
            route_id: Bus route, e.g. "G2"
            date: Optional service date as YYYY-MM-DD; today when omitted
        """
        params = {"RouteID": require("route_id", route_id)}
        if date:
            params["Date"] = date
        url = self.endpoint_url("/json/jRouteDetails", "/RouteDetails")
        return self._get(url, params, GetRouteDetailsResponse)

    def get_routes(self) -> GetRoutesResponse:
        url = self.endpoint_url("/json/jRoutes", "/Routes")
        return self._get(url, None, GetRoutesResponse)

    def get_schedule(
        self, route_id: str, date: str = "", include_variations: bool = False
    ) -> GetScheduleResponse:
        params = {
            "RouteID": require("route_id", route_id),
            "IncludingVariations": format_bool(include_variations),
        }
        if date:
            params["Date"] = date
        url = self.endpoint_url("/json/jRouteSchedule", "/RouteSchedule")
        return self._get(url, params, GetScheduleResponse)

    def get_schedule_at_stop(
        self, stop_id: str, date: str = ""
    ) -> GetScheduleAtStopResponse:
        params = {"StopID": require("stop_id", stop_id)}
        if date:
            params["Date"] = date
        url = self.endpoint_url("/json/jStopSchedule", "/StopSchedule")
        return self._get(url, params, GetScheduleAtStopResponse)

    def get_stops(self, request: GetStopsRequest | None = None) -> GetStopsResponse:
        params: dict[str, str] = {}
        if request is not None:
            params = _area_params(request.latitude, request.longitude, request.radius)
        url = self.endpoint_url("/json/jStops", "/Stops")
        return self._get(url, params, GetStopsResponse)


__all__ = ["BusInfoService"]
