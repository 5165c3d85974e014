"""
Lodging near a point (used for suggested overnight stops), from Google
Places nearby search.
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data_models import Coordinate, Hotel
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers import places
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

HOTEL_FIELDS = (
    "places.id,places.displayName,places.formattedAddress,places.nationalPhoneNumber,"
    "places.location,places.rating,places.websiteUri"
)

SEARCH_RESULTS = 5
MAX_HOTELS = 3


@provider("hotels")
def fetch_hotels(client: HttpClient, settings: Settings, center: Coordinate,
                 radius_km: Optional[float] = None) -> List[Hotel]:
    """Top-rated lodging within ``radius_km``."""
    radius_km = settings.hotels_radius_km if radius_km is None else radius_km
    found = places.search_nearby(
        client, settings, ["lodging"], center,
        radius_m=radius_km * 1000, max_results=SEARCH_RESULTS, field_mask=HOTEL_FIELDS,
    )

    hotels = []
    for place in found:
        coordinate = places.place_coordinate(place)
        if coordinate is None:
            continue
        rating = place.get("rating")
        hotels.append(Hotel(
            name=places.place_name(place),
            address=place.get("formattedAddress", ""),
            coordinate=coordinate,
            phone=place.get("nationalPhoneNumber"),
            rating=float(rating) if rating is not None else None,
            website=place.get("websiteUri"),
        ))

    hotels.sort(key=lambda h: (-(h.rating or 0), h.name))
    return hotels[:MAX_HOTELS]
