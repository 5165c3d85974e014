"""
Firefighting water access near a point: seeded lakes, rivers, boat
launches and beaches, plus Google Places hits when an API key is set.
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data.seed_sites import BC_WATER_SOURCES, MAX_SITES, WATER_SEARCH_TYPES
from sps_briefing.data_models import Coordinate, WaterSource
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.geo import rounded_distance_km
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers import places
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)


def seed_water_sources(center: Coordinate, radius_km: float) -> List[WaterSource]:
    sources = []
    for entry in BC_WATER_SOURCES:
        coordinate = Coordinate(entry["lat"], entry["lng"])
        distance = rounded_distance_km(center, coordinate)
        if distance <= radius_km:
            sources.append(WaterSource(
                name=entry["name"],
                source_type=entry["type"],
                coordinate=coordinate,
                distance_km=distance,
                access_notes=entry.get("access_notes"),
            ))
    return sources


def _live_sources(client: HttpClient, settings: Settings, center: Coordinate,
                  radius_km: float) -> List[WaterSource]:
    sources = []
    for query, source_type in WATER_SEARCH_TYPES.items():
        found = places.search_text(
            client, settings, f"{query} near {center.lat},{center.lng}",
            center=center, radius_m=radius_km * 1000, max_results=3,
        )
        for place in found:
            coordinate = places.place_coordinate(place)
            name = places.place_name(place)
            if coordinate is None or not name:
                continue
            distance = rounded_distance_km(center, coordinate)
            if distance <= radius_km:
                sources.append(WaterSource(
                    name=name,
                    source_type=source_type,
                    coordinate=coordinate,
                    distance_km=distance,
                    access_notes="Via Google Places",
                ))
    return sources


def dedupe_by_name(sources: List[WaterSource]) -> List[WaterSource]:
    """Keep the first occurrence of each name."""
    seen = set()
    unique = []
    for source in sources:
        if source.name not in seen:
            seen.add(source.name)
            unique.append(source)
    return unique


@provider("water_sources")
def fetch_water_sources(client: HttpClient, settings: Settings, center: Coordinate,
                        radius_km: Optional[float] = None) -> List[WaterSource]:
    """Up to ten water sources within ``radius_km``, closest first, unique by name."""
    radius_km = settings.water_radius_km if radius_km is None else radius_km
    sources = seed_water_sources(center, radius_km)

    if settings.google_api_key:
        try:
            sources.extend(_live_sources(client, settings, center, radius_km))
        except ProviderUnavailable as e:
            logger.warning(f"Water source supplement search failed ({e.reason}); using seed data only")

    # Seed entries come first, so a seed entry wins a name clash
    unique = dedupe_by_name(sources)
    unique.sort(key=lambda s: (s.distance_km, s.name))
    return unique[:MAX_SITES]
