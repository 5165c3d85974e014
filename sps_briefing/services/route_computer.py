"""
Route Computer.

Turns two coordinates into a drive estimate. Real distances come from the
Google Directions API; when that is unavailable the estimate falls back
to great-circle distance inflated by a terrain factor. Ferry crossings
add a fixed buffer, and routes over the overnight threshold get a
suggested stop location taken from the turn-by-turn segments.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from sps_briefing.config import Settings
from sps_briefing.data.communities import ISLAND_REGIONS
from sps_briefing.data_models import (
    Coordinate,
    Hotel,
    OvernightPoint,
    RouteEstimate,
    RouteSegment,
    RouteSource,
    TravelInfo,
)
from sps_briefing.errors import ProviderUnavailable, RouteUnavailable
from sps_briefing.geo import decode_polyline, haversine_km, in_region
from sps_briefing.services.http_client import HttpClient

logger = logging.getLogger(__name__)

# Fallback estimate parameters
TERRAIN_FACTOR = 1.4
AVERAGE_SPEED_KMH = 80.0

# Ferry wait + crossing
FERRY_BUFFER_SECONDS = 2 * 3600
FERRY_NOTE = "Includes ~2 hours for BC Ferries (wait + crossing)"

# Driving-hours policy for a single day
OVERNIGHT_THRESHOLD_SECONDS = 10 * 3600

# Google wraps road names in <b> tags: "Turn right onto <b>BC-99 N</b>"
_PLACE_PHRASE = re.compile(r"\b(?:toward|onto|via)\s+(?:<[^>]+>)*([^<]+)", re.IGNORECASE)
_HTML_TAG = re.compile(r"<[^>]+>")


def format_duration(seconds: int) -> str:
    """Render seconds as '<H> hours <M> mins', dropping a zero component."""
    seconds = max(int(seconds), 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours == 0:
        return f"{minutes} mins"
    if minutes == 0:
        return f"{hours} hours"
    return f"{hours} hours {minutes} mins"


def format_distance(meters: float) -> str:
    """
    Render a distance in kilometres.

    One decimal below 10 km, whole kilometres below 1000 km, and
    thousands of kilometres (one decimal) from 1000 km up.
    """
    km = max(meters, 0) / 1000.0
    if km < 10:
        return f"{km:.1f} km"
    if km < 1000:
        return f"{round(km):d} km"
    return f"{km / 1000.0:.1f} thousand km"


def extract_location_name(instruction: str, fallback: Coordinate) -> str:
    """
    Best-effort place name from a navigation instruction.

    Takes the phrase after "toward", "onto" or "via" up to the next HTML
    tag. Falls back to the coordinate formatted to 2 decimals.
    """
    match = _PLACE_PHRASE.search(instruction or "")
    if match:
        name = _HTML_TAG.sub("", match.group(1)).strip()
        if name:
            return name
    return fallback.label()


def find_overnight_point(segments: Iterable[RouteSegment],
                         threshold_seconds: int = OVERNIGHT_THRESHOLD_SECONDS) -> Optional[OvernightPoint]:
    """
    Endpoint of the first segment whose cumulative duration reaches the threshold.

    No interpolation inside the segment. Returns None when the route
    never reaches the threshold or has no segments.
    """
    accumulated = 0
    for segment in segments:
        accumulated += segment.duration_seconds
        if accumulated >= threshold_seconds:
            return OvernightPoint(
                coordinate=segment.end,
                location_name=extract_location_name(segment.instruction, segment.end),
            )
    return None


def island_of(point: Coordinate) -> Optional[str]:
    for name, region in ISLAND_REGIONS.items():
        if in_region(region, point):
            return name
    return None


def crosses_ferry(origin: Coordinate, destination: Coordinate) -> bool:
    """True when exactly one endpoint is on a given island (symmetric)."""
    return island_of(origin) != island_of(destination)


def estimate_fallback(origin: Coordinate, destination: Coordinate):
    """Road distance (m) and duration (s) from great-circle distance."""
    road_km = haversine_km(origin, destination) * TERRAIN_FACTOR
    return int(round(road_km * 1000)), int(round(road_km / AVERAGE_SPEED_KMH * 3600))


def build_estimate(distance_meters: int, duration_seconds: int, origin: Coordinate,
                   destination: Coordinate, segments: Sequence[RouteSegment],
                   source: RouteSource, **extra) -> RouteEstimate:
    """Apply ferry and overnight rules to a raw distance/duration."""
    ferry = crosses_ferry(origin, destination)
    adjusted = duration_seconds + (FERRY_BUFFER_SECONDS if ferry else 0)
    needs_overnight = adjusted > OVERNIGHT_THRESHOLD_SECONDS
    overnight_point = find_overnight_point(segments) if needs_overnight else None

    return RouteEstimate(
        distance_meters=distance_meters,
        duration_seconds=duration_seconds,
        adjusted_duration_seconds=adjusted,
        ferry_crossing=ferry,
        ferry_note=FERRY_NOTE if ferry else None,
        needs_overnight=needs_overnight,
        overnight_point=overnight_point,
        source=source,
        **extra,
    )


def format_travel_info(estimate: RouteEstimate, origin_label: str, destination_label: str,
                       overnight_hotels: Sequence[Hotel] = ()) -> TravelInfo:
    return TravelInfo(
        origin_label=origin_label,
        destination_label=destination_label,
        estimate=estimate,
        duration_text=format_duration(estimate.duration_seconds),
        adjusted_duration_text=format_duration(estimate.adjusted_duration_seconds),
        distance_text=format_distance(estimate.distance_meters),
        overnight_hotels=tuple(overnight_hotels),
    )


class RouteComputer:
    """Drive estimates between two points, never failing."""

    def __init__(self, client: HttpClient, settings: Settings):
        self.client = client
        self.settings = settings

    def compute(self, origin: Coordinate, destination: Coordinate,
                origin_label: Optional[str] = None, dest_label: Optional[str] = None) -> RouteEstimate:
        """
        Compute a route estimate.

        Args:
            origin: Start point
            destination: End point
            origin_label: Optional address text passed to the directions provider
            dest_label: Optional address text passed to the directions provider

        Returns:
            RouteEstimate from the directions provider, or the haversine
            fallback if the provider is unavailable
        """
        try:
            return self._compute_directions(origin, destination, origin_label, dest_label)
        except RouteUnavailable as e:
            logger.warning(f"Directions unavailable ({e}). Using haversine estimate.")
        return self.estimate(origin, destination, origin_label, dest_label)

    def estimate(self, origin: Coordinate, destination: Coordinate,
                 origin_label: Optional[str] = None, dest_label: Optional[str] = None) -> RouteEstimate:
        """Haversine-based estimate; no network."""
        distance, duration = estimate_fallback(origin, destination)
        return build_estimate(
            distance, duration, origin, destination, segments=(),
            source=RouteSource.ESTIMATE,
            start_address=origin_label,
            end_address=dest_label,
        )

    def _compute_directions(self, origin: Coordinate, destination: Coordinate,
                            origin_label: Optional[str], dest_label: Optional[str]) -> RouteEstimate:
        if not self.settings.google_api_key:
            raise RouteUnavailable("no Google API key configured")

        try:
            data = self.client.get_json(
                "Google Directions",
                self.settings.directions_url,
                params={
                    "origin": origin_label or f"{origin.lat},{origin.lng}",
                    "destination": dest_label or f"{destination.lat},{destination.lng}",
                    "key": self.settings.google_api_key,
                    "mode": "driving",
                    "units": "metric",
                    "region": "ca",
                },
            )
        except ProviderUnavailable as e:
            raise RouteUnavailable(str(e))

        status = data.get("status")
        if status != "OK":
            raise RouteUnavailable(data.get("error_message") or f"API status {status}")

        try:
            route = data["routes"][0]
            legs = route["legs"]
            distance = sum(int(leg["distance"]["value"]) for leg in legs)
            duration = sum(int(leg["duration"]["value"]) for leg in legs)
            segments = parse_segments(legs)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise RouteUnavailable(f"malformed directions response: {e}")

        polyline = (route.get("overview_polyline") or {}).get("points")
        path = ()
        if polyline:
            try:
                path = tuple(decode_polyline(polyline))
            except ValueError as e:
                logger.warning(f"Could not decode route polyline: {e}")

        return build_estimate(
            distance, duration, origin, destination, segments,
            source=RouteSource.DIRECTIONS,
            start_address=legs[0].get("start_address") if legs else None,
            end_address=legs[-1].get("end_address") if legs else None,
            polyline=polyline,
            path=path,
        )


def parse_segments(legs: Sequence[dict]) -> List[RouteSegment]:
    """Flatten leg steps into ordered route segments."""
    segments = []
    for leg in legs:
        for step in leg.get("steps") or []:
            end = step["end_location"]
            segments.append(RouteSegment(
                duration_seconds=int(step["duration"]["value"]),
                end=Coordinate(float(end["lat"]), float(end["lng"])),
                instruction=step.get("html_instructions") or "",
            ))
    return segments
