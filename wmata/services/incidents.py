"""Incidents API: bus and rail disruptions, elevator and escalator outages.

Documentation: https://developer.wmata.com/docs/services/54763641281d83086473f232
"""

from __future__ import annotations

from wmata.models.incidents import (
    GetBusIncidentsResponse,
    GetElevatorEscalatorOutagesResponse,
    GetRailIncidentsResponse,
)
from wmata.services.wmata_service import WMATAService


class IncidentsService(WMATAService):
    base_path = "/Incidents.svc"

    def get_bus_incidents(self, route: str = "") -> GetBusIncidentsResponse:
        """Bus incidents for a route, or for every route when none is given."""
        params = {"Route": route} if route else None
        url = self.endpoint_url("/json/BusIncidents", "/BusIncidents")
        return self._get(url, params, GetBusIncidentsResponse)

    def get_outages(self, station_code: str = "") -> GetElevatorEscalatorOutagesResponse:
        """Elevator and escalator outages at a station, or system-wide."""
        params = {"StationCode": station_code} if station_code else None
        url = self.endpoint_url("/json/ElevatorIncidents", "/ElevatorIncidents")
        return self._get(url, params, GetElevatorEscalatorOutagesResponse)

    def get_rail_incidents(self) -> GetRailIncidentsResponse:
        url = self.endpoint_url("/json/Incidents", "/Incidents")
        return self._get(url, None, GetRailIncidentsResponse)


__all__ = ["IncidentsService"]
