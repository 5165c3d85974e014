"""
Geographic helpers.

Great-circle distance, search bounding boxes, island-region containment
and Google encoded-polyline conversion. All functions are pure.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from sps_briefing.data_models import Coordinate

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE_LAT = 111.0

# Padding around a two-point corridor, in degrees
CORRIDOR_PADDING_DEG = 0.5

POLYLINE_PRECISION = 1e5


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate distance between two points using Haversine formula.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometres
    """
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)

    h = (
        math.sin(dlat / 2) ** 2 +
        math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) *
        math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def rounded_distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance rounded to 0.1 km, as shown in briefings."""
    return round(haversine_km(a, b), 1)


@dataclass(frozen=True)
class BoundingBox:
    min_lng: float
    min_lat: float
    max_lng: float
    max_lat: float

    def as_param(self) -> str:
        """``minLng,minLat,maxLng,maxLat`` as WFS and Open511 expect it."""
        return f"{self.min_lng},{self.min_lat},{self.max_lng},{self.max_lat}"


def point_bbox(center: Coordinate, radius_km: float) -> BoundingBox:
    """Box enclosing a circle of ``radius_km`` around ``center``."""
    lat_delta = radius_km / KM_PER_DEGREE_LAT
    # Clamp the cosine so the box stays finite near the poles
    cos_lat = max(math.cos(math.radians(center.lat)), 0.01)
    lng_delta = radius_km / (KM_PER_DEGREE_LAT * cos_lat)
    return BoundingBox(
        min_lng=center.lng - lng_delta,
        min_lat=center.lat - lat_delta,
        max_lng=center.lng + lng_delta,
        max_lat=center.lat + lat_delta,
    )


def corridor_bbox(a: Coordinate, b: Coordinate, padding: float = CORRIDOR_PADDING_DEG) -> BoundingBox:
    """Box spanning both endpoints of a route, padded on every side."""
    return BoundingBox(
        min_lng=min(a.lng, b.lng) - padding,
        min_lat=min(a.lat, b.lat) - padding,
        max_lng=max(a.lng, b.lng) + padding,
        max_lat=max(a.lat, b.lat) + padding,
    )


def region_from_bounds(min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> BaseGeometry:
    """Build a rectangular region. shapely uses (x, y) = (lng, lat)."""
    return box(min_lng, min_lat, max_lng, max_lat)


def in_region(region: BaseGeometry, point: Coordinate) -> bool:
    """True if ``point`` lies inside or on the edge of ``region``."""
    return region.covers(Point(point.lng, point.lat))


def decode_polyline(encoded: str) -> List[Coordinate]:
    """
    Decode a Google encoded polyline into coordinates.

    Raises:
        ValueError: if the string is truncated mid-value
    """
    points: List[Coordinate] = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded)

    while index < length:
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                if index >= length:
                    raise ValueError("Truncated polyline")
                b = ord(encoded[index]) - 63
                index += 1
                result |= (b & 0x1F) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if result & 1 else result >> 1)

        lat += deltas[0]
        lng += deltas[1]
        points.append(Coordinate(lat / POLYLINE_PRECISION, lng / POLYLINE_PRECISION))

    return points


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode_polyline(points: Iterable[Coordinate]) -> str:
    """Encode coordinates with Google's polyline algorithm (1e5 precision)."""
    encoded = []
    prev_lat = 0
    prev_lng = 0
    for point in points:
        lat = int(round(point.lat * POLYLINE_PRECISION))
        lng = int(round(point.lng * POLYLINE_PRECISION))
        encoded.append(_encode_value(lat - prev_lat))
        encoded.append(_encode_value(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(encoded)


def nearest(point: Coordinate, candidates: dict) -> Optional[str]:
    """
    Key of the closest coordinate in ``candidates`` (name -> Coordinate).

    Returns None for an empty mapping.
    """
    best_key = None
    best_distance = math.inf
    for key, coord in candidates.items():
        distance = haversine_km(point, coord)
        if distance < best_distance:
            best_key, best_distance = key, distance
    return best_key
