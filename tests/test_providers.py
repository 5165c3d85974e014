"""
Provider Gateway tests.

Each provider is exercised against a fake session: parsing, filtering,
sort order, internal fallback chains, and the fetch-or-null contract.
"""

import pytest
import requests

from conftest import INVALID_JSON, FakeResponse, make_client, place
from sps_briefing.data.community_ops import OPS_DATA_LAST_UPDATED, OPS_DISCLAIMER
from sps_briefing.data.pronunciations import PRONUNCIATION_NOTE
from sps_briefing.data_models import Confidence, Coordinate, ProviderResult, RoadSeverity
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.services.providers import (
    fetch_community_ops,
    fetch_employers,
    fetch_fires,
    fetch_first_nations,
    fetch_hotels,
    fetch_poi,
    fetch_road_events,
    fetch_water_sources,
    fetch_weather,
)
from sps_briefing.services.providers.base import provider
from sps_briefing.services.providers.road_events import parse_event, search_area
from sps_briefing.services.providers.weather import parse_feed, station_for

KAMLOOPS = Coordinate(50.67, -120.33)
WHISTLER = Coordinate(50.1163, -122.9574)
BURNS_LAKE = Coordinate(54.23, -125.76)


def text_query_router(answers):
    """Places text-search handler answering by substring of the query."""
    def handler(call):
        query = call.json.get("textQuery", "")
        for needle, places in answers.items():
            if needle in query:
                return FakeResponse({"places": places})
        return FakeResponse({})
    return handler


class TestProviderContract:

    def test_success_wraps_value(self):
        """Test: Return values are wrapped as success."""
        @provider("demo")
        def fetch():
            return [1, 2]

        result = fetch()
        assert result == ProviderResult(ok=True, value=[1, 2])
        assert fetch.domain == "demo"

    def test_unavailable_becomes_failure(self):
        """Test: ProviderUnavailable becomes a failure result."""
        @provider("demo")
        def fetch():
            raise ProviderUnavailable("Upstream", "timed out after 5.0s")

        result = fetch()
        assert not result.ok
        assert result.value is None
        assert result.failed_reason == "timed out after 5.0s"

    def test_parse_error_becomes_failure(self):
        """Test: Parse errors become a failure result."""
        @provider("demo")
        def fetch():
            return {}["missing"]

        result = fetch()
        assert not result.ok
        assert result.failed_reason.startswith("unparseable response")


# ---------------------------------------------------------------------------
# Fires
# ---------------------------------------------------------------------------

def fire_feature(number, lat, lng, size, of_note=False, name=None):
    return {
        "properties": {
            "FIRE_NUMBER": number,
            "GEOGRAPHIC_DESCRIPTION": name or f"{number} Creek",
            "FIRE_STATUS": "Out of Control",
            "CURRENT_SIZE": size,
            "LATITUDE": lat,
            "LONGITUDE": lng,
            "FIRE_OF_NOTE_IND": "Y" if of_note else "N",
            "FIRE_CAUSE": "Lightning",
            "FIRE_CENTRE": "Kamloops Fire Centre",
        },
    }


class TestFires:

    def setup_method(self):
        self.settings, self.session, self.client = make_client()

    def test_filters_and_sorts(self):
        """Test: Fires outside the radius are dropped, the rest sorted."""
        self.session.routes[self.settings.fires_url] = FakeResponse({"features": [
            fire_feature("K20001", 50.70, -120.40, 12.0),
            fire_feature("K20002", 50.80, -120.20, 800.0),
            fire_feature("K20003", 50.60, -120.50, 5.0, of_note=True),
            fire_feature("G80001", 56.00, -122.00, 9000.0),  # far outside 100 km
            {"properties": {"FIRE_NUMBER": "BROKEN"}},
        ]})
        result = fetch_fires(self.client, self.settings, KAMLOOPS)

        assert result.ok
        numbers = [f.fire_number for f in result.value]
        assert numbers == ["K20003", "K20002", "K20001"], (
            "Fire of note first, then largest"
        )
        first = result.value[0]
        assert first.url.endswith("/K20003")
        assert first.distance_km == round(first.distance_km, 1)

    def test_active_fire_filter_requested(self):
        """Test: Only active fires are requested."""
        self.session.routes[self.settings.fires_url] = FakeResponse({"features": []})
        fetch_fires(self.client, self.settings, KAMLOOPS)
        assert self.session.calls[0].params["CQL_FILTER"] == "FIRE_OUT_DATE IS NULL"
        assert self.session.calls[0].timeout == self.settings.provider_timeout

    def test_upstream_down(self):
        """Test: Timeout is a failure, not an exception."""
        self.session.routes[self.settings.fires_url] = requests.exceptions.Timeout()
        result = fetch_fires(self.client, self.settings, KAMLOOPS)
        assert not result.ok
        assert "timed out" in result.failed_reason

    def test_invalid_json(self):
        """Test: Invalid JSON is a failure."""
        self.session.routes[self.settings.fires_url] = FakeResponse(INVALID_JSON)
        result = fetch_fires(self.client, self.settings, KAMLOOPS)
        assert not result.ok
        assert "invalid JSON" in result.failed_reason


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------

KAMLOOPS_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Kamloops - Weather - Environment Canada</title>
  <entry>
    <title>HEAT WARNING IN EFFECT, Kamloops</title>
    <category term="Warnings and Watches"/>
    <summary type="html">Daytime highs near 38 degrees.</summary>
  </entry>
  <entry>
    <title>Current Conditions: 24.3°C</title>
    <category term="Current Conditions"/>
    <summary type="html"><![CDATA[<b>Condition:</b> Mostly Cloudy <br/>
<b>Temperature:</b> 24.3&deg;C <br/>
<b>Humidity:</b> 31 % <br/>
<b>Wind:</b> SW 15 km/h<br/>
<b>Air Quality Health Index:</b> 3 <br/>]]></summary>
  </entry>
  <entry>
    <title>Friday: Sunny. High 31.</title>
    <category term="Weather Forecasts"/>
    <summary type="html">Sunny. Wind southwest 20 km/h. High 31.</summary>
  </entry>
  <entry>
    <title>Friday night: Clear. Low 14.</title>
    <category term="Weather Forecasts"/>
    <summary type="html">Clear. Low 14.</summary>
  </entry>
  <entry>
    <title>Saturday: Chance of showers. High plus 2.</title>
    <category term="Weather Forecasts"/>
    <summary type="html">Chance of showers. High plus 2. POP 40%</summary>
  </entry>
</feed>
"""

NO_WARNINGS_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Pemberton - Weather - Environment Canada</title>
  <entry>
    <title>No watches or warnings in effect, Pemberton</title>
    <category term="Warnings and Watches"/>
    <summary type="html">No watches or warnings in effect.</summary>
  </entry>
  <entry>
    <title>Monday: Periods of rain. Low minus 3.</title>
    <category term="Weather Forecasts"/>
    <summary type="html">Periods of rain. 60 percent chance of showers.</summary>
  </entry>
</feed>
"""


class TestWeather:

    def test_station_exact_partial_and_nearest(self):
        """Test: Station lookup tries exact, partial, then nearest."""
        assert station_for("Kamloops") == "bc-45"
        assert station_for("City of Kamloops") == "bc-45"
        assert station_for("Birken", near=Coordinate(50.48, -122.60)) == "bc-16"
        assert station_for("Nowhere", near=Coordinate(70.0, -140.0)) is None

    def test_parse_feed(self):
        """Test: Feed parsing yields conditions, warnings and forecast."""
        report = parse_feed(KAMLOOPS_FEED, "bc-45")

        assert report.location == "Kamloops"
        assert report.station_code == "bc-45"
        assert report.current.temperature_c == pytest.approx(24.3)
        assert report.current.condition == "Mostly Cloudy"
        assert report.current.humidity_pct == 31
        assert report.current.wind == "SW 15 km/h"
        assert report.warnings == ("HEAT WARNING IN EFFECT, Kamloops",)

        days = [p.day for p in report.forecast]
        assert days == ["Friday", "Friday night", "Saturday"]
        assert report.forecast[0].high_c == 31
        assert report.forecast[1].low_c == 14
        assert report.forecast[2].high_c == 2
        assert report.forecast[2].pop_pct == 40

    def test_no_warnings_title_is_not_a_warning(self):
        """Test: "No watches or warnings" is not a warning."""
        report = parse_feed(NO_WARNINGS_FEED, "bc-16")
        assert report.warnings == ()
        assert report.current is None
        assert report.forecast[0].low_c == -3
        assert report.forecast[0].pop_pct == 60

    def test_fetch_uses_station_url(self):
        """Test: Feed URL is built from the station code."""
        settings, session, client = make_client()
        url = settings.weather_url_template.format(code="bc-45")
        session.routes[url] = FakeResponse(text=KAMLOOPS_FEED)

        result = fetch_weather(client, settings, "Kamloops")
        assert result.ok
        assert result.value.location == "Kamloops"

    def test_no_station_is_failure(self):
        """Test: No nearby station is a failure."""
        settings, session, client = make_client()
        result = fetch_weather(client, settings, "Atlantis")
        assert not result.ok
        assert session.calls == []

    def test_malformed_feed_is_failure(self):
        """Test: Malformed XML is a failure."""
        settings, session, client = make_client()
        url = settings.weather_url_template.format(code="bc-45")
        session.routes[url] = FakeResponse(text="<html><body>Service unavailable")

        result = fetch_weather(client, settings, "Kamloops")
        assert not result.ok
        assert result.failed_reason.startswith("unparseable response")


# ---------------------------------------------------------------------------
# First Nations
# ---------------------------------------------------------------------------

def nation_feature(name, band, lat, lng):
    return {
        "geometry": {"type": "Point", "coordinates": [lng, lat]},
        "properties": {"BAND_NAME": name, "BAND_NUMBER": band},
    }


class TestFirstNations:

    def setup_method(self):
        self.settings, self.session, self.client = make_client()
        self.features = {"features": [
            nation_feature("Tk'emlups te Secwepemc", 685, 50.68, -120.30),
            nation_feature("Skeetchestn", 686, 50.83, -120.94),
            nation_feature("Lil'wat Nation", 560, 50.30, -122.75),
        ]}

    def test_primary_endpoint(self):
        """Test: Primary endpoint answers, results sorted by distance."""
        self.session.routes[self.settings.first_nations_url] = FakeResponse(self.features)
        result = fetch_first_nations(self.client, self.settings, KAMLOOPS)

        assert result.ok
        names = [n.name for n in result.value]
        assert names == ["Tk'emlups te Secwepemc", "Skeetchestn"], "Closest first, outside radius dropped"
        assert result.value[0].pronunciation == "shuh-HWEP-muhk"
        assert result.value[0].pronunciation_note == PRONUNCIATION_NOTE
        assert result.value[1].pronunciation is None
        assert not self.session.calls_to(self.settings.first_nations_alt_url)

    def test_alternate_endpoint_on_failure(self):
        """Test: Alternate endpoint used when primary fails."""
        self.session.routes[self.settings.first_nations_url] = FakeResponse(status_code=502)
        self.session.routes[self.settings.first_nations_alt_url] = FakeResponse(self.features)
        result = fetch_first_nations(self.client, self.settings, Coordinate(50.32, -122.80))

        assert result.ok
        assert result.value[0].name == "Lil'wat Nation"
        assert result.value[0].pronunciation == "LEEL-wat"
        alt_call = self.session.calls_to(self.settings.first_nations_alt_url)[0]
        assert alt_call.params["bbox"].endswith(",EPSG:4326")

    def test_both_endpoints_down(self):
        """Test: Both endpoints down is a failure."""
        result = fetch_first_nations(self.client, self.settings, KAMLOOPS)
        assert not result.ok


# ---------------------------------------------------------------------------
# Employers and water sources
# ---------------------------------------------------------------------------

class TestEmployers:

    def test_seed_only_without_key(self):
        """Test: Seed employers returned without an API key."""
        settings, session, client = make_client()
        result = fetch_employers(client, settings, BURNS_LAKE)

        assert result.ok
        assert {e.name for e in result.value} == {"Babine Forest Products", "Lakes District Hospital"}
        distances = [e.distance_km for e in result.value]
        assert distances == sorted(distances)
        assert session.calls == []

    def test_supplement_when_seed_is_thin(self):
        """Test: Places supplements a thin seed list."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = text_query_router({
            "hospital": [place("Lakes District Hospital & Health Centre", 54.233, -125.766)],
            "mill": [place("Decker Lake Forest Products", 54.28, -125.85, "Decker Lake, BC")],
        })
        result = fetch_employers(client, settings, BURNS_LAKE)

        assert result.ok
        names = [e.name for e in result.value]
        assert "Decker Lake Forest Products" in names
        assert "Lakes District Hospital & Health Centre" not in names, "Duplicate of a seed employer"
        added = next(e for e in result.value if e.name == "Decker Lake Forest Products")
        assert added.employer_type == "Mill"
        assert len(session.calls_to(settings.places_text_url)) == 4

    def test_no_supplement_when_seed_is_rich(self):
        """Test: No live search when the seed is rich."""
        settings, session, client = make_client(google_api_key="key")
        result = fetch_employers(client, settings, KAMLOOPS, radius_km=500)

        assert result.ok
        assert len(result.value) == 10
        assert session.calls == []

    def test_supplement_failure_keeps_seed(self):
        """Test: Supplement failure still returns the seed."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = FakeResponse(status_code=403)
        result = fetch_employers(client, settings, BURNS_LAKE)

        assert result.ok
        assert len(result.value) == 2


class TestWaterSources:

    def test_top_ten_closest(self):
        """Test: Water sources are the ten closest."""
        settings, _, client = make_client()
        result = fetch_water_sources(client, settings, WHISTLER)

        assert result.ok
        assert len(result.value) == 10
        keys = [(w.distance_km, w.name) for w in result.value]
        assert keys == sorted(keys)
        assert all(w.distance_km <= 50 for w in result.value)

    def test_live_results_deduplicated(self):
        """Test: Live results duplicating the seed are dropped."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = text_query_router({
            "boat launch": [place("Alta Lake", 50.117, -122.966)],
            "reservoir": [place("Whistler Reservoir", 50.118, -122.957)],
        })
        result = fetch_water_sources(client, settings, WHISTLER)

        names = [w.name for w in result.value]
        assert names.count("Alta Lake") == 1
        alta = next(w for w in result.value if w.name == "Alta Lake")
        assert alta.access_notes == "Road access, boat launch", "Seed entry wins a name clash"
        reservoir = next(w for w in result.value if w.name == "Whistler Reservoir")
        assert reservoir.source_type == "reservoir"
        assert reservoir.access_notes == "Via Google Places"


# ---------------------------------------------------------------------------
# Points of interest
# ---------------------------------------------------------------------------

class TestPoi:

    def test_regional_fallback_without_key(self):
        """Test: No key falls back to the regional district."""
        settings, session, client = make_client()
        result = fetch_poi(client, settings, "fire department", "Pemberton")

        assert result.ok
        search = result.value
        assert session.calls == []
        assert search.results[0].confidence == Confidence.FALLBACK
        assert search.results[0].name == "Squamish-Lillooet Regional District Emergency Services"
        assert search.fallback_used == "Regional District contact for Squamish-Lillooet Regional District"
        assert search.regional_contact.phone == "604-894-6371"

    def test_provincial_fallback_for_unknown_community(self):
        """Test: Unmapped community falls back to provincial contacts."""
        settings, _, client = make_client()
        search = fetch_poi(client, settings, "hospital", "Atlantis").value

        assert search.results[0].source == "Provincial"
        assert search.results[0].phone == "911"
        assert search.fallback_used == "Provincial emergency contact"
        assert search.regional_contact is None

    def test_tries_variations_in_order(self):
        """Test: Query variations are tried in order."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = text_query_router({
            "Pemberton Fire Rescue": [place("Pemberton Fire Rescue", 50.32, -122.80, "7400 Prospect St",
                                            nationalPhoneNumber="604-894-6135")],
        })
        search = fetch_poi(client, settings, "fire department", "Pemberton").value

        queries = [c.json["textQuery"] for c in session.calls]
        assert queries == ["Pemberton Fire Department, BC, Canada", "Pemberton Fire Rescue, BC, Canada"]
        assert search.results[0].confidence == Confidence.HIGH
        assert search.results[0].phone == "604-894-6135"
        assert search.fallback_used is None
        assert search.regional_contact is not None, "Regional contact attached even on a direct hit"

    def test_nearby_town_fallback(self):
        """Test: Nearby towns are searched at medium confidence."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = text_query_router({
            "Pemberton Hospital": [place("Pemberton Health Centre", 50.32, -122.80)],
        })
        search = fetch_poi(client, settings, "hospital", "Mount Currie").value

        assert search.results[0].confidence == Confidence.MEDIUM
        assert search.results[0].source == "Nearby: Pemberton"
        assert search.fallback_used == "Searched nearby town: Pemberton"

    def test_live_failure_falls_back_to_contacts(self):
        """Test: Live search failure falls back to contacts."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_text_url] = FakeResponse(status_code=500)
        search = fetch_poi(client, settings, "rcmp", "Kamloops").value

        assert search.results[0].source == "Regional District"
        assert search.regional_contact.name == "Thompson-Nicola Regional District"


# ---------------------------------------------------------------------------
# Hotels
# ---------------------------------------------------------------------------

class TestHotels:

    def test_best_rated_first(self):
        """Test: Hotels are ordered by rating."""
        settings, session, client = make_client(google_api_key="key")
        session.routes[settings.places_nearby_url] = FakeResponse({"places": [
            place("Motel A", 53.90, -122.75, rating=3.9),
            place("Inn B", 53.91, -122.76, rating=4.6),
            place("Lodge C", 53.92, -122.74),
            place("Hotel D", 53.93, -122.77, rating=4.6),
        ]})
        result = fetch_hotels(client, settings, Coordinate(53.92, -122.75))

        assert result.ok
        assert [h.name for h in result.value] == ["Hotel D", "Inn B", "Motel A"]
        body = session.calls[0].json
        assert body["includedTypes"] == ["lodging"]
        assert body["locationRestriction"]["circle"]["radius"] == 50000.0

    def test_no_key_is_failure(self):
        """Test: Hotels need an API key."""
        settings, _, client = make_client()
        assert not fetch_hotels(client, settings, KAMLOOPS).ok


# ---------------------------------------------------------------------------
# Community ops
# ---------------------------------------------------------------------------

class TestCommunityOps:

    def test_known_community(self):
        """Test: Known community returns its ops data and disclaimer."""
        result = fetch_community_ops("  Pemberton ")
        ops = result.value

        assert result.ok
        assert ops.data_available
        assert ops.community == "Pemberton"
        assert ops.raws_station["id"] == "C45714"
        assert ops.last_updated == OPS_DATA_LAST_UPDATED
        assert ops.disclaimer == OPS_DISCLAIMER
        assert len(ops.access_constraints) == 4

    def test_copy_does_not_touch_table(self):
        """Test: Returned data is a copy of the table."""
        ops = fetch_community_ops("Pemberton").value
        ops.raws_station["id"] = "CHANGED"
        assert fetch_community_ops("Pemberton").value.raws_station["id"] == "C45714"

    def test_unknown_community(self):
        """Test: Unknown community gets provincial contacts."""
        ops = fetch_community_ops("Atlantis").value

        assert not ops.data_available
        assert "Atlantis" in ops.message
        assert [c["organization"] for c in ops.eoc_contacts] == ["BC Emergency Management", "BC Wildfire Service"]


# ---------------------------------------------------------------------------
# Road events
# ---------------------------------------------------------------------------

def road_event(event_id, severity, road, event_type="INCIDENT", **extra):
    event = {
        "id": event_id,
        "event_type": event_type,
        "severity": severity,
        "headline": "INCIDENT",
        "description": f"{road} closed",
        "roads": [{"name": road, "direction": "BOTH"}],
        "geography": {"type": "Point", "coordinates": [-121.5, 50.2]},
        "status": "ACTIVE",
    }
    event.update(extra)
    return event


class TestRoadEvents:

    def test_search_area_modes(self):
        """Test: Point and corridor search areas."""
        corridor = search_area(origin=KAMLOOPS, destination=WHISTLER, center=WHISTLER)
        assert corridor.min_lat == pytest.approx(WHISTLER.lat - 0.5)
        point = search_area(center=KAMLOOPS, radius_km=50)
        assert point.max_lat == pytest.approx(KAMLOOPS.lat + 50 / 111.0)
        with pytest.raises(ValueError):
            search_area()

    def test_sorted_by_severity_then_road(self):
        """Test: Events sorted by severity, road and id."""
        settings, session, client = make_client()
        session.routes[settings.road_events_url] = FakeResponse({"events": [
            road_event("drivebc.ca/3", "MINOR", "Highway 1"),
            road_event("drivebc.ca/1", "MAJOR", "Highway 5"),
            road_event("drivebc.ca/2", "MAJOR", "Highway 99"),
            road_event("drivebc.ca/4", "SOMETHING_NEW", "Highway 97"),
            {"headline": "missing id"},
        ]})
        result = fetch_road_events(client, settings, center=KAMLOOPS)

        assert result.ok
        assert [e.event_id for e in result.value] == [
            "drivebc.ca/1", "drivebc.ca/2", "drivebc.ca/3", "drivebc.ca/4",
        ]
        assert result.value[-1].severity == RoadSeverity.UNKNOWN
        params = session.calls[0].params
        assert params["status"] == "ACTIVE"
        assert params["limit"] == 100

    def test_corridor_bbox_sent(self):
        """Test: Corridor box is sent upstream."""
        settings, session, client = make_client()
        session.routes[settings.road_events_url] = FakeResponse({"events": []})
        fetch_road_events(client, settings, origin=KAMLOOPS, destination=WHISTLER)
        west, south, east, north = (float(v) for v in session.calls[0].params["bbox"].split(","))
        assert south == pytest.approx(49.6163)
        assert east == pytest.approx(-119.83)

    def test_parse_interval_string_and_line(self):
        """Test: Interval strings and line geometry are parsed."""
        event = parse_event(road_event(
            "drivebc.ca/9", "MODERATE", "Highway 16", event_type="CONSTRUCTION",
            schedule={"intervals": ["2024-07-01T07:00/2024-07-31T19:00"]},
            geography={"type": "LineString", "coordinates": [[-124.0, 54.0], [-124.1, 54.1]]},
        ))
        assert event.event_type == "Construction"
        assert event.start_time == "2024-07-01T07:00"
        assert event.end_time == "2024-07-31T19:00"
        assert event.coordinate == Coordinate(54.0, -124.0)

    def test_upstream_down(self):
        """Test: DriveBC outage is a failure."""
        settings, session, client = make_client()
        session.routes[settings.road_events_url] = FakeResponse(status_code=503)
        assert not fetch_road_events(client, settings, center=KAMLOOPS).ok
