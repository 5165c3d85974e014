"""
Route Computer tests.

Covers formatting, the overnight walk, ferry detection and the
directions/haversine paths.
"""

import pytest

from conftest import FakeResponse, make_client
from sps_briefing.data_models import Coordinate, RouteSegment, RouteSource
from sps_briefing.services.route_computer import (
    FERRY_BUFFER_SECONDS,
    FERRY_NOTE,
    OVERNIGHT_THRESHOLD_SECONDS,
    RouteComputer,
    build_estimate,
    crosses_ferry,
    extract_location_name,
    find_overnight_point,
    format_distance,
    format_duration,
    format_travel_info,
)

VANCOUVER = Coordinate(49.28, -123.12)
KAMLOOPS = Coordinate(50.67, -120.33)
VICTORIA = Coordinate(48.43, -123.37)
NANAIMO = Coordinate(49.17, -123.94)
FORT_NELSON = Coordinate(58.81, -122.70)


def directions_payload(distance_m, duration_s, steps=(), polyline="_p~iF~ps|U"):
    return {
        "status": "OK",
        "routes": [{
            "overview_polyline": {"points": polyline},
            "legs": [{
                "distance": {"value": distance_m},
                "duration": {"value": duration_s},
                "start_address": "Vancouver, BC, Canada",
                "end_address": "Kamloops, BC, Canada",
                "steps": list(steps),
            }],
        }],
    }


def step(duration_s, lat, lng, instruction=""):
    return {
        "duration": {"value": duration_s},
        "end_location": {"lat": lat, "lng": lng},
        "html_instructions": instruction,
    }


class TestFormatting:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 mins"),
        (1800, "30 mins"),
        (3600, "1 hours"),
        (5400, "1 hours 30 mins"),
        (36000, "10 hours"),
        (59, "0 mins"),
    ])
    def test_format_duration(self, seconds, expected):
        """Test: Duration text drops zero components."""
        assert format_duration(seconds) == expected

    @pytest.mark.parametrize("meters,expected", [
        (0, "0.0 km"),
        (5400, "5.4 km"),
        (12345, "12 km"),
        (356700, "357 km"),
        (999400, "999 km"),
        (1000000, "1.0 thousand km"),
        (1234000, "1.2 thousand km"),
    ])
    def test_format_distance(self, meters, expected):
        """Test: Distance text by magnitude."""
        assert format_distance(meters) == expected


class TestLocationName:

    def test_onto_with_bold_tags(self):
        """Test: Road name after "onto" with tags stripped."""
        assert extract_location_name("Turn right onto <b>BC-99 N</b>", VANCOUVER) == "BC-99 N"

    def test_toward(self):
        """Test: Place after "toward"."""
        name = extract_location_name("Continue toward <b>Prince George</b>", VANCOUVER)
        assert name == "Prince George"

    def test_via_plain_text(self):
        """Test: Place after "via" without tags."""
        assert extract_location_name("Head north via Trans-Canada Hwy", VANCOUVER) == "Trans-Canada Hwy"

    def test_falls_back_to_coordinate(self):
        """Test: No phrase gives the coordinate label."""
        assert extract_location_name("Turn left", Coordinate(53.9171, -122.7497)) == "53.92, -122.75"

    def test_empty_instruction(self):
        """Test: Empty instruction gives the coordinate label."""
        assert extract_location_name("", Coordinate(50.0, -120.0)) == "50.00, -120.00"


class TestOvernightPoint:

    def test_first_segment_reaching_threshold(self):
        """Test: Overnight point is the crossing segment's end."""
        segments = [
            RouteSegment(20000, Coordinate(51.0, -121.0), "Continue onto <b>BC-97 N</b>"),
            RouteSegment(10000, Coordinate(52.0, -122.0), "Turn left"),
            RouteSegment(20000, Coordinate(53.0, -122.5), "Continue toward <b>Prince George</b>"),
        ]
        point = find_overnight_point(segments, threshold_seconds=36000)
        assert point is not None
        assert point.coordinate == Coordinate(53.0, -122.5), (
            "Cumulative 20000, 30000, 50000: the third segment crosses 36000"
        )
        assert point.location_name == "Prince George"

    def test_exact_threshold_is_reached(self):
        """Test: Reaching the threshold exactly counts."""
        segments = [RouteSegment(18000, Coordinate(51.0, -121.0)), RouteSegment(18000, Coordinate(52.0, -122.0))]
        point = find_overnight_point(segments, threshold_seconds=36000)
        assert point.coordinate == Coordinate(52.0, -122.0)

    def test_never_reached(self):
        """Test: Short routes have no overnight point."""
        segments = [RouteSegment(1000, Coordinate(51.0, -121.0))]
        assert find_overnight_point(segments) is None

    def test_no_segments(self):
        """Test: No segments, no overnight point."""
        assert find_overnight_point([]) is None


class TestFerry:

    def test_mainland_to_island(self):
        """Test: Mainland to island needs a ferry."""
        assert crosses_ferry(VANCOUVER, VICTORIA)

    def test_symmetric(self):
        """Test: Ferry detection is symmetric."""
        assert crosses_ferry(VANCOUVER, VICTORIA) == crosses_ferry(VICTORIA, VANCOUVER)
        assert crosses_ferry(VANCOUVER, KAMLOOPS) == crosses_ferry(KAMLOOPS, VANCOUVER)

    def test_both_on_island(self):
        """Test: Island to island needs no ferry."""
        assert not crosses_ferry(VICTORIA, NANAIMO)

    def test_both_on_mainland(self):
        """Test: Mainland to mainland needs no ferry."""
        assert not crosses_ferry(VANCOUVER, KAMLOOPS)


class TestBuildEstimate:

    def test_adjusted_equals_duration_without_ferry(self):
        """Test: No ferry, no adjustment."""
        estimate = build_estimate(350000, 12600, VANCOUVER, KAMLOOPS, (), RouteSource.DIRECTIONS)
        assert estimate.adjusted_duration_seconds == estimate.duration_seconds
        assert not estimate.ferry_crossing
        assert estimate.ferry_note is None

    def test_ferry_adds_buffer(self):
        """Test: Ferry adds two hours and a note."""
        estimate = build_estimate(110000, 10800, VANCOUVER, VICTORIA, (), RouteSource.DIRECTIONS)
        assert estimate.ferry_crossing
        assert estimate.adjusted_duration_seconds == 10800 + FERRY_BUFFER_SECONDS
        assert estimate.ferry_note == FERRY_NOTE

    def test_exactly_threshold_does_not_need_overnight(self):
        """Test: Exactly ten hours needs no overnight stop."""
        estimate = build_estimate(900000, OVERNIGHT_THRESHOLD_SECONDS, VANCOUVER, KAMLOOPS, (),
                                  RouteSource.ESTIMATE)
        assert not estimate.needs_overnight

    def test_ferry_buffer_can_tip_into_overnight(self):
        """Test: Ferry buffer can push a trip over ten hours."""
        estimate = build_estimate(900000, 35000, KAMLOOPS, VICTORIA, (), RouteSource.ESTIMATE)
        assert estimate.adjusted_duration_seconds > OVERNIGHT_THRESHOLD_SECONDS
        assert estimate.needs_overnight
        assert estimate.overnight_point is None, "No segments means no point to suggest"


class TestRouteComputer:

    def test_fallback_without_api_key(self):
        """Test: No key gives the haversine estimate."""
        settings, session, client = make_client()
        estimate = RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS)
        assert estimate.source == RouteSource.ESTIMATE
        assert session.calls == [], "No directions call should be made without a key"
        # 1.4 x great-circle, at 80 km/h
        assert 350000 < estimate.distance_meters < 365000
        assert estimate.duration_seconds == pytest.approx(estimate.distance_meters / 1000 / 80 * 3600, abs=1)

    def test_directions_success(self):
        """Test: Directions response becomes the estimate."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.directions_url] = FakeResponse(directions_payload(355000, 12600))
        estimate = RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS, "Vancouver", "Kamloops")

        assert estimate.source == RouteSource.DIRECTIONS
        assert estimate.distance_meters == 355000
        assert estimate.duration_seconds == 12600
        assert estimate.polyline == "_p~iF~ps|U"
        params = session.calls[0].params
        assert params["origin"] == "Vancouver"
        assert params["mode"] == "driving"
        assert params["region"] == "ca"

    def test_overview_polyline_decoded_to_path(self):
        """Test: Overview polyline is decoded into the route path."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.directions_url] = FakeResponse(
            directions_payload(355000, 12600, polyline="_p~iF~ps|U_ulLnnqC_mqNvxq`@")
        )
        estimate = RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS)

        assert len(estimate.path) == 3
        assert estimate.path[0].lat == pytest.approx(38.5, abs=1e-5)
        assert estimate.path[-1].lng == pytest.approx(-126.453, abs=1e-5)

    def test_corrupt_polyline_keeps_route(self):
        """Test: A corrupt polyline leaves the path empty."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.directions_url] = FakeResponse(
            directions_payload(355000, 12600, polyline="_p~iF~ps|U_")
        )
        estimate = RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS)

        assert estimate.source == RouteSource.DIRECTIONS
        assert estimate.path == ()

    def test_directions_uses_coordinates_without_labels(self):
        """Test: Coordinates are sent when no label is given."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.directions_url] = FakeResponse(directions_payload(355000, 12600))
        RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS)
        assert session.calls[0].params["destination"] == "50.67,-120.33"

    def test_long_route_gets_overnight_point(self):
        """Test: Long routes get an overnight point."""
        settings, session, client = make_client(google_api_key="key")
        steps = [
            step(20000, 52.13, -122.14, "Continue onto <b>BC-97 N</b>"),
            step(10000, 53.92, -122.75, "Turn right"),
            step(20000, 56.25, -120.85, "Continue toward <b>Fort St. John</b>"),
        ]
        session.routes[settings.directions_url] = FakeResponse(directions_payload(1500000, 50000, steps))
        estimate = RouteComputer(client, settings).compute(VANCOUVER, FORT_NELSON)

        assert estimate.needs_overnight
        assert estimate.overnight_point.coordinate == Coordinate(56.25, -120.85)
        assert estimate.overnight_point.location_name == "Fort St. John"

    @pytest.mark.parametrize("response", [
        FakeResponse({"status": "ZERO_RESULTS", "routes": []}),
        FakeResponse({"status": "OK", "routes": []}),
        FakeResponse(status_code=500),
    ])
    def test_directions_failure_falls_back(self, response):
        """Test: Directions failures fall back to the estimate."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.directions_url] = response
        estimate = RouteComputer(client, settings).compute(VANCOUVER, KAMLOOPS)
        assert estimate.source == RouteSource.ESTIMATE
        assert estimate.distance_meters > 0

    def test_adjusted_never_below_duration(self):
        """Test: Adjusted time never below raw time."""
        settings, _, client = make_client()
        computer = RouteComputer(client, settings)
        for origin, destination in [(VANCOUVER, VICTORIA), (KAMLOOPS, FORT_NELSON), (VICTORIA, NANAIMO)]:
            estimate = computer.compute(origin, destination)
            assert estimate.adjusted_duration_seconds >= estimate.duration_seconds
            assert (estimate.adjusted_duration_seconds == estimate.duration_seconds) == (not estimate.ferry_crossing)


class TestTravelInfo:

    def test_text_fields(self):
        """Test: Travel info text fields."""
        estimate = build_estimate(110000, 5400, VANCOUVER, VICTORIA, (), RouteSource.DIRECTIONS)
        info = format_travel_info(estimate, "Vancouver", "Victoria")
        assert info.duration_text == "1 hours 30 mins"
        assert info.adjusted_duration_text == "3 hours 30 mins"
        assert info.distance_text == "110 km"
        assert info.overnight_hotels == ()
