"""
Geocoder Adapter.

Resolves free-text BC place names to coordinates. The BC Address
Geocoder is tried first because it knows small rural localities; OSM
Nominatim is the general-purpose fallback. When a source returns several
distinct plausible places the caller gets a Disambiguation instead of
the first hit.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from sps_briefing.config import Settings
from sps_briefing.data.communities import COMMUNITY_COORDINATES, GEOCODE_OVERRIDES
from sps_briefing.data.regional_districts import BC_REGIONAL_DISTRICTS, region_key_for
from sps_briefing.data_models import (
    Coordinate,
    Disambiguation,
    GeocodeCandidate,
    GeocodeMatch,
    GeocodeResult,
)
from sps_briefing.errors import LocationNotFound, ProviderUnavailable
from sps_briefing.geo import haversine_km, nearest
from sps_briefing.services.http_client import HttpClient

logger = logging.getLogger(__name__)

PRIMARY_SOURCE = "BC Geocoder"
SECONDARY_SOURCE = "OpenStreetMap Nominatim"

MAX_RESULTS = 5

# BC Geocoder match scores below this are treated as unusable (0-100 scale)
MIN_SCORE = 50.0

# Nominatim importance measures prominence, not match quality; an unlinked
# village sits around 0.25, so any hit with a coordinate is usable
NOMINATIM_MIN_SCORE = 0.0

# Candidates within this many points of the best score are plausible
SCORE_BAND = 10.0

# Hits closer than this to an already-kept candidate are the same place
DISTINCT_PLACE_KM = 5.0

# BC Geocoder match precisions that never identify a usable place
UNUSABLE_PRECISIONS = {"PROVINCE"}


@dataclass(frozen=True)
class _RawHit:
    coordinate: Coordinate
    formatted_address: str
    score: float
    locality: Optional[str]


class Geocoder:
    """Resolve place names, preferring the provincial geocoder."""

    def __init__(self, client: HttpClient, settings: Settings):
        self.client = client
        self.settings = settings

    def resolve(self, free_text: str) -> GeocodeResult:
        """
        Resolve a place name.

        Args:
            free_text: Human-entered place name

        Returns:
            GeocodeMatch for a single place, Disambiguation for several

        Raises:
            ValueError: if the text is blank
            LocationNotFound: if no source returns a usable coordinate
        """
        if free_text is None or not free_text.strip():
            raise ValueError("Place name must not be empty")
        query = free_text.strip()

        override = GEOCODE_OVERRIDES.get(query.lower())
        if override is not None:
            logger.debug(f"Geocode override hit for {query!r}")
            return GeocodeMatch(
                coordinate=override["coordinate"],
                formatted_address=override["formatted_address"],
                score=100.0,
                source="override",
            )

        sources = (
            (PRIMARY_SOURCE, self._fetch_bc, MIN_SCORE),
            (SECONDARY_SOURCE, self._fetch_nominatim, NOMINATIM_MIN_SCORE),
        )
        for source, fetch, min_score in sources:
            try:
                hits = fetch(query)
            except ProviderUnavailable as e:
                logger.warning(f"Geocoder source failed, trying next: {e}")
                continue

            plausible = select_plausible(hits, min_score)
            if not plausible:
                logger.info(f"{source} returned no usable match for {query!r}")
                continue
            return self._decide(query, source, plausible)

        raise LocationNotFound(query)

    def _decide(self, query: str, source: str, hits: List[_RawHit]) -> GeocodeResult:
        if len(hits) == 1:
            hit = hits[0]
            logger.info(f"Geocoded {query!r} via {source}: {hit.coordinate.label()} (score {hit.score:.0f})")
            return GeocodeMatch(
                coordinate=hit.coordinate,
                formatted_address=hit.formatted_address,
                score=hit.score,
                source=source,
            )

        names = distinct_display_names(hits)
        logger.info(f"Geocoding {query!r} is ambiguous: {len(hits)} candidates from {source}")
        return Disambiguation(
            query=query,
            candidates=tuple(
                GeocodeCandidate(
                    coordinate=hit.coordinate,
                    display_name=name,
                    formatted_address=hit.formatted_address,
                )
                for hit, name in zip(hits, names)
            ),
        )

    def _fetch_bc(self, query: str) -> List[_RawHit]:
        address = query if "BC" in query else f"{query}, BC"
        data = self.client.get_json(
            PRIMARY_SOURCE,
            self.settings.bc_geocoder_url,
            params={
                "addressString": address,
                "maxResults": MAX_RESULTS,
                "outputSRS": 4326,
            },
        )
        hits = []
        for feature in data.get("features") or []:
            props = feature.get("properties") or {}
            if props.get("matchPrecision") in UNUSABLE_PRECISIONS:
                continue
            try:
                lng, lat = feature["geometry"]["coordinates"][:2]
                coordinate = Coordinate(float(lat), float(lng))
            except (KeyError, TypeError, ValueError):
                logger.debug(f"Skipping malformed geocoder feature: {feature!r}")
                continue
            hits.append(_RawHit(
                coordinate=coordinate,
                formatted_address=props.get("fullAddress") or address,
                score=float(props.get("score") or 0),
                locality=props.get("localityName"),
            ))
        return hits

    def _fetch_nominatim(self, query: str) -> List[_RawHit]:
        data = self.client.get_json(
            SECONDARY_SOURCE,
            self.settings.nominatim_url,
            params={
                "q": f"{query}, British Columbia, Canada",
                "format": "json",
                "limit": MAX_RESULTS,
                "countrycodes": "ca",
                "addressdetails": 1,
            },
        )
        hits = []
        for item in data or []:
            try:
                coordinate = Coordinate(float(item["lat"]), float(item["lon"]))
            except (KeyError, TypeError, ValueError):
                continue
            address = item.get("address") or {}
            locality = (
                address.get("city") or address.get("town")
                or address.get("village") or address.get("hamlet")
            )
            hits.append(_RawHit(
                coordinate=coordinate,
                formatted_address=item.get("display_name", query),
                # importance is 0-1; scale to the BC geocoder's 0-100
                score=float(item.get("importance") or 0) * 100,
                locality=locality,
            ))
        return hits


def select_plausible(hits: List[_RawHit], min_score: float = MIN_SCORE) -> List[_RawHit]:
    """
    Keep hits that are both well-scored and genuinely distinct places.

    Order follows the source's ranking; duplicates of an already-kept
    place (within DISTINCT_PLACE_KM) are dropped.
    """
    usable = [h for h in hits if h.score >= min_score]
    if not usable:
        return []
    best = max(h.score for h in usable)
    kept: List[_RawHit] = []
    for hit in usable:
        if best - hit.score > SCORE_BAND:
            continue
        if any(haversine_km(hit.coordinate, k.coordinate) <= DISTINCT_PLACE_KM for k in kept):
            continue
        kept.append(hit)
    return kept


def context_label(hit: _RawHit) -> str:
    """Locality plus nearest known community and its regional district."""
    locality = hit.locality or hit.formatted_address.split(",")[0].strip()
    community = nearest(hit.coordinate, COMMUNITY_COORDINATES)
    if community is None:
        return locality

    district = None
    region_key = region_key_for(community)
    if region_key:
        district = BC_REGIONAL_DISTRICTS[region_key]["name"]

    community_title = community.title()
    if community_title.lower() == locality.lower():
        return f"{locality}, {district}" if district else locality
    if district:
        return f"{locality} (near {community_title}, {district})"
    return f"{locality} (near {community_title})"


def distinct_display_names(hits: List[_RawHit]) -> List[str]:
    """Context labels, with coordinates appended wherever two labels collide."""
    labels = [context_label(h) for h in hits]
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return [
        f"{label} [{hit.coordinate.label()}]" if counts[label] > 1 else label
        for label, hit in zip(labels, hits)
    ]
