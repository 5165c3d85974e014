"""
Active road events from the DriveBC Open511 API, either around a single
point or along the corridor between two points.
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data_models import SEVERITY_ORDER, Coordinate, RoadEvent, RoadSeverity
from sps_briefing.geo import BoundingBox, corridor_bbox, point_bbox
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

EVENT_LIMIT = 100

EVENT_TYPE_LABELS = {
    "CONSTRUCTION": "Construction",
    "INCIDENT": "Incident",
    "SPECIAL_EVENT": "Special Event",
    "WEATHER_CONDITION": "Weather",
    "ROAD_CONDITION": "Road Condition",
}


def search_area(center: Optional[Coordinate] = None, radius_km: float = 50.0,
                origin: Optional[Coordinate] = None,
                destination: Optional[Coordinate] = None) -> BoundingBox:
    """
    Corridor box when both endpoints are known, otherwise a point box.

    Raises:
        ValueError: if neither a centre nor both endpoints are given
    """
    if origin is not None and destination is not None:
        return corridor_bbox(origin, destination)
    if center is not None:
        return point_bbox(center, radius_km)
    raise ValueError("Road events need a centre point or an origin/destination pair")


def _first_point(geography: Optional[dict]) -> Optional[Coordinate]:
    if not geography:
        return None
    coords = geography.get("coordinates")
    # Point is [lng, lat]; LineString/MultiPoint is a list of those
    while coords and isinstance(coords[0], (list, tuple)):
        coords = coords[0]
    if not coords or len(coords) < 2:
        return None
    return Coordinate(float(coords[1]), float(coords[0]))


def parse_event(event: dict) -> RoadEvent:
    roads = event.get("roads") or []
    road = roads[0] if roads else {}
    intervals = (event.get("schedule") or {}).get("intervals") or []
    interval = intervals[0] if intervals else {}
    if isinstance(interval, str):
        # Open511 also allows "start/end" ISO interval strings
        start, _, end = interval.partition("/")
        interval = {"start": start or None, "end": end or None}

    try:
        severity = RoadSeverity[(event.get("severity") or "UNKNOWN").upper()]
    except KeyError:
        severity = RoadSeverity.UNKNOWN

    event_type = event.get("event_type") or ""
    return RoadEvent(
        event_id=str(event["id"]),
        event_type=EVENT_TYPE_LABELS.get(event_type, event_type),
        severity=severity,
        headline=event.get("headline") or "",
        description=event.get("description") or "",
        road_name=road.get("name") or "Unknown Road",
        direction=road.get("direction"),
        coordinate=_first_point(event.get("geography")),
        start_time=interval.get("start"),
        end_time=interval.get("end"),
        status=event.get("status") or "ACTIVE",
    )


@provider("road_events")
def fetch_road_events(client: HttpClient, settings: Settings, center: Optional[Coordinate] = None,
                      radius_km: Optional[float] = None, origin: Optional[Coordinate] = None,
                      destination: Optional[Coordinate] = None) -> List[RoadEvent]:
    """
    Active road events, most severe first.

    Args:
        center: Point-mode search centre
        radius_km: Point-mode radius, defaults to settings.road_events_radius_km
        origin: Corridor-mode start
        destination: Corridor-mode end
    """
    radius_km = settings.road_events_radius_km if radius_km is None else radius_km
    bbox = search_area(center, radius_km, origin, destination)
    data = client.get_json("DriveBC", settings.road_events_url, params={
        "status": "ACTIVE",
        "format": "json",
        "bbox": bbox.as_param(),
        "limit": EVENT_LIMIT,
    })

    events = []
    for raw in data.get("events") or []:
        try:
            events.append(parse_event(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed road event: {e!r}")

    events.sort(key=lambda e: (SEVERITY_ORDER[e.severity], e.road_name, e.event_id))
    logger.info(f"Found {len(events)} active road events in {bbox.as_param()}")
    return events
