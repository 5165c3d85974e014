"""
Briefing Record Builder.

Pure merge of the geocoded location and the per-domain provider results
into the immutable BriefingRecord. No I/O and no clock: the caller passes
the generation time.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple

from sps_briefing.data.pronunciations import PRONUNCIATION_DISCLAIMER
from sps_briefing.data_models import (
    BriefingRecord,
    Fire,
    GeocodeMatch,
    PointsOfInterest,
    ProviderResult,
)

TRAVEL = "travel"


def _value(results: Dict[str, ProviderResult], domain: str):
    result = results.get(domain)
    if result is None or not result.ok:
        return None
    return result.value


def _as_tuple(value) -> Optional[tuple]:
    return tuple(value) if value is not None else None


def split_fires(fires: Iterable[Fire], fire_number: Optional[str]) -> Tuple[Optional[Fire], Tuple[Fire, ...]]:
    """
    Separate the requested fire from the rest.

    Matching is exact but case-insensitive. The requested fire never
    appears in the nearby list, even if it was not found by the provider.
    """
    wanted = fire_number.strip().lower() if fire_number and fire_number.strip() else None
    specific = None
    nearby = []
    for fire in fires:
        if wanted is not None and fire.fire_number.lower() == wanted:
            if specific is None:
                specific = fire
            continue
        nearby.append(fire)
    return specific, tuple(nearby)


def build_record(community: str, generated_at: datetime, location: Optional[GeocodeMatch],
                 results: Dict[str, ProviderResult], fire_number: Optional[str] = None) -> BriefingRecord:
    """
    Assemble the briefing.

    Args:
        community: Community name as entered
        generated_at: Generation timestamp (UTC)
        location: Geocoded destination
        results: Provider results keyed by domain name
        fire_number: Optional incident number to single out

    Returns:
        BriefingRecord with absent fields for failed domains, which are
        also listed in ``unavailable_sections``
    """
    specific_fire = None
    nearby_fires = None
    first_nations = _as_tuple(_value(results, "first_nations"))
    fires = _value(results, "fires")
    if fires is not None:
        specific_fire, nearby_fires = split_fires(fires, fire_number)

    pois = PointsOfInterest(
        fire_department=_value(results, "poi_fire_department"),
        hospital=_value(results, "poi_hospital"),
        rcmp=_value(results, "poi_rcmp"),
        grocery_store=_value(results, "poi_grocery_store"),
        hotel=_value(results, "poi_hotel"),
    )

    regional_contact = None
    for search in (pois.fire_department, pois.hospital, pois.rcmp, pois.grocery_store, pois.hotel):
        if search is not None and search.regional_contact is not None:
            regional_contact = search.regional_contact
            break

    return BriefingRecord(
        community=community,
        generated_at=generated_at,
        fire_number=fire_number,
        location=location,
        travel=_value(results, TRAVEL),
        specific_fire=specific_fire,
        nearby_fires=nearby_fires,
        weather=_value(results, "weather"),
        first_nations=first_nations,
        first_nations_disclaimer=PRONUNCIATION_DISCLAIMER if first_nations is not None else None,
        points_of_interest=pois,
        regional_contact=regional_contact,
        water_sources=_as_tuple(_value(results, "water_sources")),
        major_employers=_as_tuple(_value(results, "employers")),
        community_ops=_value(results, "community_ops"),
        road_events=_as_tuple(_value(results, "road_events")),
        unavailable_sections=tuple(sorted(d for d, r in results.items() if not r.ok)),
    )
