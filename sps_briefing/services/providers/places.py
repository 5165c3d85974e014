"""
Google Places (New) search helpers shared by POI, employer, water-source
and hotel providers.
"""

import logging
from typing import Any, Dict, List, Optional

from sps_briefing.config import Settings
from sps_briefing.data_models import Coordinate
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.services.http_client import HttpClient

logger = logging.getLogger(__name__)

SOURCE = "Google Places"

BASIC_FIELDS = "places.displayName,places.formattedAddress,places.location"


def _headers(settings: Settings, field_mask: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": settings.google_api_key,
        "X-Goog-FieldMask": field_mask,
    }


def _circle(center: Coordinate, radius_m: float) -> Dict[str, Any]:
    return {
        "circle": {
            "center": {"latitude": center.lat, "longitude": center.lng},
            "radius": float(radius_m),
        },
    }


def search_text(client: HttpClient, settings: Settings, query: str,
                center: Optional[Coordinate] = None, radius_m: float = 50000,
                max_results: Optional[int] = None,
                field_mask: str = BASIC_FIELDS) -> List[Dict[str, Any]]:
    """
    Text search, optionally biased toward a circle.

    Returns the raw ``places`` list (possibly empty).

    Raises:
        ProviderUnavailable: no API key, or the request failed
    """
    if not settings.google_api_key:
        raise ProviderUnavailable(SOURCE, "no Google API key configured")

    body: Dict[str, Any] = {"textQuery": query}
    if center is not None:
        body["locationBias"] = _circle(center, radius_m)
    if max_results is not None:
        body["maxResultCount"] = max_results

    data = client.post_json(SOURCE, settings.places_text_url, body, headers=_headers(settings, field_mask))
    return data.get("places") or []


def search_nearby(client: HttpClient, settings: Settings, included_types: List[str],
                  center: Coordinate, radius_m: float, max_results: int,
                  field_mask: str) -> List[Dict[str, Any]]:
    """Nearby search restricted to a circle."""
    if not settings.google_api_key:
        raise ProviderUnavailable(SOURCE, "no Google API key configured")

    body = {
        "includedTypes": included_types,
        "maxResultCount": max_results,
        "locationRestriction": _circle(center, radius_m),
    }
    data = client.post_json(SOURCE, settings.places_nearby_url, body, headers=_headers(settings, field_mask))
    return data.get("places") or []


def place_name(place: Dict[str, Any]) -> str:
    return (place.get("displayName") or {}).get("text", "")


def place_coordinate(place: Dict[str, Any]) -> Optional[Coordinate]:
    location = place.get("location")
    if not location:
        return None
    return Coordinate(float(location["latitude"]), float(location["longitude"]))
