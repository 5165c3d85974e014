"""
Major employers near a point: the static seed list, topped up from
Google Places when the seed list is thin and an API key is configured.
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data.seed_sites import (
    BC_MAJOR_EMPLOYERS,
    EMPLOYER_SEARCH_TYPES,
    EMPLOYER_SUPPLEMENT_THRESHOLD,
    MAX_SITES,
)
from sps_briefing.data_models import Coordinate, Employer
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.geo import rounded_distance_km
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers import places
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

EMPLOYER_FIELDS = "places.displayName,places.formattedAddress,places.location,places.types"


def seed_employers(center: Coordinate, radius_km: float) -> List[Employer]:
    employers = []
    for entry in BC_MAJOR_EMPLOYERS:
        coordinate = Coordinate(entry["lat"], entry["lng"])
        distance = rounded_distance_km(center, coordinate)
        if distance <= radius_km:
            employers.append(Employer(
                name=entry["name"],
                employer_type=entry["type"],
                coordinate=coordinate,
                distance_km=distance,
                employee_estimate=entry.get("employee_estimate"),
                notes=entry.get("notes"),
            ))
    return employers


def _already_listed(employers: List[Employer], name: str) -> bool:
    # Loose match on the first word: "Kelowna General" vs "Kelowna General Hospital"
    first_word = name.lower().split(" ")[0] if name else ""
    return any(first_word and first_word in e.name.lower() for e in employers)


def _supplement(client: HttpClient, settings: Settings, center: Coordinate,
                radius_km: float, employers: List[Employer]) -> None:
    for search_type in EMPLOYER_SEARCH_TYPES:
        found = places.search_text(
            client, settings, f"{search_type} near {center.lat},{center.lng}",
            center=center, radius_m=radius_km * 1000, max_results=3, field_mask=EMPLOYER_FIELDS,
        )
        for place in found:
            coordinate = places.place_coordinate(place)
            name = places.place_name(place)
            if coordinate is None or not name:
                continue
            distance = rounded_distance_km(center, coordinate)
            if distance <= radius_km and not _already_listed(employers, name):
                employers.append(Employer(
                    name=name,
                    employer_type=search_type.capitalize(),
                    coordinate=coordinate,
                    distance_km=distance,
                    address=place.get("formattedAddress"),
                ))


@provider("employers")
def fetch_employers(client: HttpClient, settings: Settings, center: Coordinate,
                    radius_km: Optional[float] = None) -> List[Employer]:
    """Up to ten major employers within ``radius_km``, closest first."""
    radius_km = settings.employers_radius_km if radius_km is None else radius_km
    employers = seed_employers(center, radius_km)

    if settings.google_api_key and len(employers) < EMPLOYER_SUPPLEMENT_THRESHOLD:
        try:
            _supplement(client, settings, center, radius_km, employers)
        except ProviderUnavailable as e:
            logger.warning(f"Employer supplement search failed ({e.reason}); using seed data only")

    employers.sort(key=lambda e: (e.distance_km, e.name))
    return employers[:MAX_SITES]
