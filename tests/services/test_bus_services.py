"""Tests for the bus route, stop and prediction services."""

from __future__ import annotations

import pytest

from tests.fixtures import wmata_payloads as payloads
from wmata.core.constants import ResponseFormat
from wmata.models.bus_info import GetPositionsRequest, GetStopsRequest
from wmata.models.bus_predictions import GetNextBusResponse, NextBusPrediction
from wmata.services.bus_info import BusInfoService
from wmata.services.bus_predictions import BusPredictionsService
from wmata.services.wmata_errors import MissingParameterError


@pytest.fixture
def bus_info(wmata_client):
    return BusInfoService(wmata_client)


@pytest.fixture
def bus_info_xml(wmata_client):
    return BusInfoService(wmata_client, ResponseFormat.XML)


class TestGetPositions:
    def test_sends_only_set_filters(self, bus_info, transport):
        transport.add("/Bus.svc/json/jBusPositions", payloads.BUS_POSITIONS_JSON)

        response = bus_info.get_positions(
            GetPositionsRequest(route_id="42", latitude=38.9, longitude=-77.04)
        )

        assert transport.last_request.url.query == (
            b"Lat=38.9&Lon=-77.04&RouteID=42"
        )
        position = response.bus_positions[0]
        assert position.vehicle_id == "7201"
        assert position.direction_number == 1
        assert position.trip_destination == "METRO CENTER"

    def test_without_filters(self, bus_info, transport):
        transport.add("/Bus.svc/json/jBusPositions", '{"BusPositions": []}')

        bus_info.get_positions()

        assert transport.last_request.url.query == b""

    def test_xml_path(self, bus_info_xml, transport):
        transport.add(
            "/Bus.svc/BusPositions",
            f"<BusPositionsResp {payloads.XML_HEADER}><BusPositions/></BusPositionsResp>",
        )

        response = bus_info_xml.get_positions(GetPositionsRequest(radius=1000))

        assert transport.last_request.url.path == "/Bus.svc/BusPositions"
        assert transport.last_request.url.query == b"Radius=1000"
        assert response.bus_positions == []


class TestGetRouteDetails:
    def test_route_and_date(self, bus_info, transport):
        transport.add(
            "/Bus.svc/json/jRouteDetails",
            '{"RouteID":"G2","Name":"G2 - GEORGETOWN UNIV - HOWARD UNIV",'
            '"Direction0":{"DirectionNum":"0","DirectionText":"EAST",'
            '"Shape":[{"Lat":38.907367,"Lon":-77.071641,"SeqNum":1}],'
            '"Stops":[{"StopID":"1001370","Name":"37TH ST NW + O ST NW",'
            '"Lon":-77.071641,"Lat":38.907367,"Routes":["G2","G2v1"]}],'
            '"TripHeadsign":"LEDROIT PARK"},"Direction1":null}',
        )

        response = bus_info.get_route_details("G2", date="2019-04-28")

        assert transport.last_request.url.query == b"Date=2019-04-28&RouteID=G2"
        assert response.direction0.stops[0].routes == ["G2", "G2v1"]
        assert response.direction0.shapes[0].sequence_number == 1
        assert response.direction1 is None

    def test_missing_route_raises(self, bus_info, transport):
        with pytest.raises(MissingParameterError, match="route_id is required"):
            bus_info.get_route_details("")

        assert transport.requests == []


def test_get_routes(bus_info_xml, transport):
    transport.add(
        "/Bus.svc/Routes",
        f"<RoutesResp {payloads.XML_HEADER}><Routes><Route>"
        "<LineDescription>Georgetown - Howard University Line</LineDescription>"
        "<Name>G2 - GEORGETOWN UNIV - HOWARD UNIV</Name><RouteID>G2</RouteID>"
        "</Route></Routes></RoutesResp>",
    )

    response = bus_info_xml.get_routes()

    assert response.routes[0].route_id == "G2"
    assert response.routes[0].line_description == "Georgetown - Howard University Line"


class TestGetSchedule:
    def test_always_sends_variations_flag(self, bus_info, transport):
        transport.add("/Bus.svc/json/jRouteSchedule", payloads.ROUTE_SCHEDULE_JSON)

        response = bus_info.get_schedule("G2")

        assert transport.last_request.url.query == (
            b"IncludingVariations=false&RouteID=G2"
        )
        trip = response.direction0[0]
        assert trip.trip_direction == "EAST"
        assert trip.stop_times[0].stop_sequence == 1
        assert response.direction1 == []

    def test_with_variations_and_date(self, bus_info, transport):
        transport.add("/Bus.svc/json/jRouteSchedule", payloads.ROUTE_SCHEDULE_JSON)

        bus_info.get_schedule("G2", date="2019-04-28", include_variations=True)

        assert transport.last_request.url.query == (
            b"Date=2019-04-28&IncludingVariations=true&RouteID=G2"
        )

    def test_missing_route_raises(self, bus_info):
        with pytest.raises(MissingParameterError):
            bus_info.get_schedule("")


class TestGetScheduleAtStop:
    def test_sends_stop(self, bus_info, transport):
        transport.add(
            "/Bus.svc/json/jStopSchedule",
            '{"ScheduleArrivals":[{"ScheduleTime":"2019-04-28T06:40:00","DirectionNum":"0",'
            '"StartTime":"2019-04-28T06:40:00","EndTime":"2019-04-28T07:03:00","RouteID":"G2",'
            '"TripDirectionText":"EAST","TripHeadsign":"LEDROIT PARK","TripID":"939584010"}],'
            '"Stop":{"StopID":"1001370","Name":"37TH ST NW + O ST NW","Lon":-77.071641,'
            '"Lat":38.907367,"Routes":["G2"]}}',
        )

        response = bus_info.get_schedule_at_stop("1001370")

        assert transport.last_request.url.query == b"StopID=1001370"
        assert response.schedule_arrivals[0].schedule_time == "2019-04-28T06:40:00"
        assert response.stop_info.stop_id == "1001370"

    def test_missing_stop_raises(self, bus_info, transport):
        with pytest.raises(MissingParameterError, match="stop_id is required"):
            bus_info.get_schedule_at_stop("")

        assert transport.requests == []


class TestGetStops:
    def test_search_area(self, bus_info, transport):
        transport.add("/Bus.svc/json/jStops", '{"Stops": []}')

        bus_info.get_stops(
            GetStopsRequest(latitude=38.878586, longitude=-76.989626, radius=500)
        )

        assert transport.last_request.url.query == (
            b"Lat=38.878586&Lon=-76.989626&Radius=500"
        )

    def test_all_stops(self, bus_info_xml, transport):
        transport.add(
            "/Bus.svc/Stops",
            f"<StopsResp {payloads.XML_HEADER}><Stops><Stop><Lat>38.878586</Lat>"
            "<Lon>-76.989626</Lon><Name>K ST + POTOMAC AVE</Name>"
            '<Routes xmlns:a="http://schemas.microsoft.com/2003/10/Serialization/Arrays">'
            "<a:string>V4</a:string><a:string>V4v1</a:string></Routes>"
            "<StopID>1000533</StopID></Stop></Stops></StopsResp>",
        )

        response = bus_info_xml.get_stops()

        assert transport.last_request.url.query == b""
        assert response.stops[0].routes == ["V4", "V4v1"]
        assert response.stops[0].stop_id == "1000533"


class TestGetNextBuses:
    def test_json(self, wmata_client, transport):
        transport.add("/NextBusService.svc/json/jPredictions", payloads.NEXT_BUSES_JSON)

        response = BusPredictionsService(wmata_client).get_next_buses("1001370")

        assert transport.last_request.url.query == b"StopID=1001370"
        assert response == GetNextBusResponse(
            stop_name="37th St Nw + O St Nw",
            predictions=[
                NextBusPrediction(
                    route_id="G2",
                    direction_text="East to Ledroit Park - Howard University",
                    direction_number="0",
                    minutes=2,
                    vehicle_id="3072",
                    trip_id="939584010",
                ),
                NextBusPrediction(
                    route_id="G2",
                    direction_text="East to Ledroit Park - Howard University",
                    direction_number="0",
                    minutes=38,
                    vehicle_id="3081",
                    trip_id="939585010",
                ),
            ],
        )

    def test_xml_matches_json(self, wmata_client, transport):
        transport.add("/NextBusService.svc/json/jPredictions", payloads.NEXT_BUSES_JSON)
        transport.add("/NextBusService.svc/Predictions", payloads.NEXT_BUSES_XML)

        from_json = BusPredictionsService(wmata_client).get_next_buses("1001370")
        from_xml = BusPredictionsService(wmata_client, "xml").get_next_buses("1001370")

        assert from_xml.xml_name.local == "NextBusResponse"
        assert from_xml.model_copy(update={"xml_name": None}) == from_json

    def test_missing_stop_raises_same_error_every_time(self, wmata_client, transport):
        service = BusPredictionsService(wmata_client)

        messages = []
        for _ in range(2):
            with pytest.raises(MissingParameterError) as exc_info:
                service.get_next_buses("")
            messages.append(str(exc_info.value))

        assert messages == ["stop_id is required", "stop_id is required"]
        assert transport.requests == []
