"""
Point-of-interest search by category with a "try hard" fallback chain.

1. The community with each known query variation (confidence high)
2. Listed nearby towns with the first two variations (confidence medium)
3. The community's regional district contact (fallback)
4. Provincial emergency services (fallback)

The regional district contact is attached whenever the community is
mapped to one, regardless of which step answered.
"""

import logging
from typing import List, Optional, Tuple

from sps_briefing.config import Settings
from sps_briefing.data.regional_districts import (
    BC_REGIONAL_DISTRICTS,
    NEARBY_TOWN_VARIATIONS,
    NEARBY_TOWNS,
    POI_VARIATIONS,
    PROVINCIAL_EMERGENCY,
    region_key_for,
)
from sps_briefing.data_models import (
    Confidence,
    Coordinate,
    PoiSearch,
    PointOfInterest,
    RegionalContact,
)
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers import places
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

MAX_RESULTS = 3
SEARCH_RADIUS_M = 50000

POI_FIELDS = "places.displayName,places.formattedAddress,places.nationalPhoneNumber,places.location"


def _search(client: HttpClient, settings: Settings, query: str,
            near: Optional[Coordinate]) -> List[PointOfInterest]:
    found = places.search_text(
        client, settings, f"{query}, BC, Canada",
        center=near, radius_m=SEARCH_RADIUS_M, field_mask=POI_FIELDS,
    )
    return [
        PointOfInterest(
            name=places.place_name(place),
            address=place.get("formattedAddress", ""),
            phone=place.get("nationalPhoneNumber"),
            coordinate=places.place_coordinate(place),
            confidence=Confidence.HIGH,
            source="Google Places",
        )
        for place in found[:MAX_RESULTS]
    ]


def regional_contact_for(community: str) -> Optional[RegionalContact]:
    key = region_key_for(community)
    if key is None or key not in BC_REGIONAL_DISTRICTS:
        return None
    district = BC_REGIONAL_DISTRICTS[key]
    return RegionalContact(name=district["name"], phone=district["phone"], website=district["website"])


def _live_search(client: HttpClient, settings: Settings, community: str, variations: Tuple[str, ...],
                 near: Optional[Coordinate]) -> Tuple[List[PointOfInterest], Optional[str]]:
    for variation in variations:
        found = _search(client, settings, f"{community} {variation}", near)
        if found:
            return found, None

    for town in NEARBY_TOWNS.get(community.lower().strip(), ()):
        for variation in variations[:NEARBY_TOWN_VARIATIONS]:
            found = _search(client, settings, f"{town} {variation}", None)
            if found:
                relabelled = [
                    PointOfInterest(
                        name=p.name, address=p.address, phone=p.phone, coordinate=p.coordinate,
                        website=p.website, confidence=Confidence.MEDIUM, source=f"Nearby: {town}",
                    )
                    for p in found
                ]
                return relabelled, f"Searched nearby town: {town}"
    return [], None


@provider("poi")
def fetch_poi(client: HttpClient, settings: Settings, category: str, community: str,
              near: Optional[Coordinate] = None) -> PoiSearch:
    """
    Search for a category of place in or near a community.

    Args:
        category: e.g. "fire department", "hospital", "rcmp"
        community: Community name as entered
        near: Community centre used to bias the live search

    Returns:
        PoiSearch, never empty: falls back to regional then provincial contacts
    """
    variations = POI_VARIATIONS.get(category.lower().strip(), (category,))
    results: List[PointOfInterest] = []
    fallback_used = None

    if settings.google_api_key:
        try:
            results, fallback_used = _live_search(client, settings, community, variations, near)
        except ProviderUnavailable as e:
            logger.warning(f"Live POI search for {category!r} failed ({e.reason}); using contacts")
    else:
        logger.debug("No Google API key; POI search goes straight to contacts")

    regional_contact = regional_contact_for(community)
    if not results and regional_contact is not None:
        results = [PointOfInterest(
            name=f"{regional_contact.name} Emergency Services",
            address=f"Contact: {regional_contact.phone}",
            phone=regional_contact.phone,
            website=regional_contact.website,
            confidence=Confidence.FALLBACK,
            source="Regional District",
        )]
        fallback_used = f"Regional District contact for {regional_contact.name}"

    if not results:
        results = [PointOfInterest(
            name=PROVINCIAL_EMERGENCY["name"],
            address=PROVINCIAL_EMERGENCY["address"],
            phone=PROVINCIAL_EMERGENCY["phone"],
            confidence=Confidence.FALLBACK,
            source="Provincial",
        )]
        fallback_used = "Provincial emergency contact"

    return PoiSearch(
        results=tuple(results),
        searched_community=community,
        searched_type=category,
        fallback_used=fallback_used,
        regional_contact=regional_contact,
    )
