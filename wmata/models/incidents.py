"""Records for the Incidents API (Incidents.svc)."""

from __future__ import annotations

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


class BusIncident(WMATAModel):
    date_updated: str | None = Field(None, alias="DateUpdated")
    description: str | None = Field(None, alias="Description")
    incident_id: str | None = Field(None, alias="IncidentID")
    incident_type: str | None = Field(None, alias="IncidentType")
    routes_affected: list[str] = Field(default_factory=list, alias="RoutesAffected")


class GetBusIncidentsResponse(WMATAResponse):
    xml_root = "BusIncidentsResp"

    bus_incidents: list[BusIncident] = Field(
        default_factory=list, alias="BusIncidents"
    )


class ElevatorIncident(WMATAModel):
    date_out_of_service: str | None = Field(None, alias="DateOutOfServ")
    date_updated: str | None = Field(None, alias="DateUpdated")
    # Deprecated by WMATA.
    display_order: int | None = Field(None, alias="DisplayOrder")
    estimated_return_to_service: str | None = Field(
        None, alias="EstimatedReturnToService"
    )
    location_description: str | None = Field(None, alias="LocationDescription")
    station_code: str | None = Field(None, alias="StationCode")
    station_name: str | None = Field(None, alias="StationName")
    # Deprecated by WMATA.
    symptom_code: str | None = Field(None, alias="SymptomCode")
    symptom_description: str | None = Field(None, alias="SymptomDescription")
    # Deprecated by WMATA, use the time portion of date_out_of_service.
    time_out_of_service: str | None = Field(None, alias="TimeOutOfService")
    unit_name: str | None = Field(None, alias="UnitName")
    # Deprecated by WMATA.
    unit_status: str | None = Field(None, alias="UnitStatus")
    unit_type: str | None = Field(None, alias="UnitType")


class GetElevatorEscalatorOutagesResponse(WMATAResponse):
    xml_root = "ElevatorIncidentsResp"

    elevator_incidents: list[ElevatorIncident] = Field(
        default_factory=list, alias="ElevatorIncidents"
    )


class RailIncident(WMATAModel):
    date_updated: str | None = Field(None, alias="DateUpdated")
    # Deprecated by WMATA.
    delay_severity: str | None = Field(None, alias="DelaySeverity")
    description: str | None = Field(None, alias="Description")
    # Deprecated by WMATA.
    emergency_text: str | None = Field(None, alias="EmergencyText")
    # Deprecated by WMATA.
    end_location_full_name: str | None = Field(None, alias="EndLocationFullName")
    incident_id: str | None = Field(None, alias="IncidentID")
    incident_type: str | None = Field(None, alias="IncidentType")
    # Semicolon separated line codes, e.g. "RD; OR;".
    lines_affected: str | None = Field(None, alias="LinesAffected")
    # Deprecated by WMATA.
    passenger_delay: float | None = Field(None, alias="PassengerDelay")
    # Deprecated by WMATA.
    start_location_full_name: str | None = Field(
        None, alias="StartLocationFullName"
    )

    @property
    def line_codes(self) -> list[str]:
        """Line codes parsed out of ``lines_affected``."""
        if not self.lines_affected:
            return []
        return [
            code.strip() for code in self.lines_affected.split(";") if code.strip()
        ]


class GetRailIncidentsResponse(WMATAResponse):
    xml_root = "IncidentsResp"

    rail_incidents: list[RailIncident] = Field(default_factory=list, alias="Incidents")


__all__ = [
    "BusIncident",
    "GetBusIncidentsResponse",
    "ElevatorIncident",
    "GetElevatorEscalatorOutagesResponse",
    "RailIncident",
    "GetRailIncidentsResponse",
]
