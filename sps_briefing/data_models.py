"""
Data models for the dispatch briefing engine.

This module defines the core data structures shared by the geocoder, the
route computer, the providers and the briefing builder. Everything that
ends up inside a BriefingRecord is frozen; collections are tuples.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class Confidence(Enum):
    """How a point of interest was found."""
    HIGH = "high"          # Direct hit in the requested community
    MEDIUM = "medium"      # Found in a nearby town
    LOW = "low"
    FALLBACK = "fallback"  # Regional or provincial contact, not a real place


class RoadSeverity(Enum):
    """Road event severity, most severe first in SEVERITY_ORDER."""
    MAJOR = "Major"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


SEVERITY_ORDER: Dict[RoadSeverity, int] = {
    RoadSeverity.MAJOR: 0,
    RoadSeverity.MODERATE: 1,
    RoadSeverity.MINOR: 2,
    RoadSeverity.UNKNOWN: 3,
}


class RouteSource(Enum):
    """Where a route estimate came from."""
    DIRECTIONS = "directions"  # External directions provider
    ESTIMATE = "estimate"      # Haversine fallback


@dataclass(frozen=True)
class Coordinate:
    """WGS84 point. Construction outside the valid range raises ValueError."""
    lat: float
    lng: float

    def __post_init__(self):
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}. Must be between -90 and 90.")
        if not (-180.0 <= self.lng <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lng}. Must be between -180 and 180.")

    def label(self) -> str:
        return f"{self.lat:.2f}, {self.lng:.2f}"


# ---------------------------------------------------------------------------
# Geocoding
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeocodeMatch:
    """A single confident geocoding result."""
    coordinate: Coordinate
    formatted_address: str
    score: float
    source: str


@dataclass(frozen=True)
class GeocodeCandidate:
    """One of several plausible places for an ambiguous query."""
    coordinate: Coordinate
    display_name: str
    formatted_address: str


@dataclass(frozen=True)
class Disambiguation:
    """
    Several plausible places matched the query.

    Returned to the caller instead of silently picking one. Always holds at
    least two candidates with distinct display names. ``target`` names the
    input that was ambiguous ("destination" or "origin").
    """
    query: str
    candidates: Tuple[GeocodeCandidate, ...]
    target: str = "destination"

    def __post_init__(self):
        if len(self.candidates) < 2:
            raise ValueError("Disambiguation requires at least 2 candidates")
        names = [c.display_name for c in self.candidates]
        if len(set(names)) != len(names):
            raise ValueError(f"Disambiguation display names must be distinct: {names}")


GeocodeResult = Union[GeocodeMatch, Disambiguation]


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RouteSegment:
    """One step of a driving route, as returned by the directions provider."""
    duration_seconds: int
    end: Coordinate
    instruction: str = ""


@dataclass(frozen=True)
class OvernightPoint:
    coordinate: Coordinate
    location_name: str
    suggested_stop_time: str = "After approximately 10 hours of driving"


@dataclass(frozen=True)
class RouteEstimate:
    """Drive estimate between two points, ferry- and overnight-aware."""
    distance_meters: int
    duration_seconds: int
    adjusted_duration_seconds: int
    ferry_crossing: bool
    needs_overnight: bool
    source: RouteSource
    ferry_note: Optional[str] = None
    overnight_point: Optional[OvernightPoint] = None
    start_address: Optional[str] = None
    end_address: Optional[str] = None
    polyline: Optional[str] = None
    path: Tuple[Coordinate, ...] = ()


@dataclass(frozen=True)
class Hotel:
    name: str
    address: str
    coordinate: Coordinate
    phone: Optional[str] = None
    rating: Optional[float] = None
    website: Optional[str] = None


@dataclass(frozen=True)
class TravelInfo:
    """Route estimate plus the human-readable text a briefing shows."""
    origin_label: str
    destination_label: str
    estimate: RouteEstimate
    duration_text: str
    adjusted_duration_text: str
    distance_text: str
    overnight_hotels: Tuple[Hotel, ...] = ()


# ---------------------------------------------------------------------------
# Provider contract
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProviderResult(Generic[T]):
    """
    Uniform fetch-or-null outcome of a provider call.

    ``ok`` is True exactly when ``value`` is meaningful. Failures carry a
    short human-readable reason and are never raised to the orchestrator.
    """
    ok: bool
    value: Optional[T] = None
    failed_reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ProviderResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ProviderResult[T]":
        return cls(ok=False, failed_reason=reason)


# ---------------------------------------------------------------------------
# Domain values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Fire:
    fire_number: str
    name: str
    status: str
    size_hectares: float
    coordinate: Coordinate
    is_fire_of_note: bool
    url: str
    distance_km: float
    cause: Optional[str] = None
    fire_centre: Optional[str] = None


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: Optional[float] = None
    condition: Optional[str] = None
    humidity_pct: Optional[int] = None
    wind: Optional[str] = None


@dataclass(frozen=True)
class ForecastPeriod:
    day: str
    summary: str
    high_c: Optional[int] = None
    low_c: Optional[int] = None
    pop_pct: Optional[int] = None


@dataclass(frozen=True)
class WeatherReport:
    location: str
    station_code: str
    current: Optional[CurrentConditions] = None
    forecast: Tuple[ForecastPeriod, ...] = ()
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FirstNation:
    name: str
    band_number: int
    coordinate: Coordinate
    distance_km: float
    pronunciation: Optional[str] = None
    pronunciation_note: Optional[str] = None


@dataclass(frozen=True)
class RegionalContact:
    name: str
    phone: str
    website: str


@dataclass(frozen=True)
class PointOfInterest:
    name: str
    address: str
    confidence: Confidence
    source: str
    phone: Optional[str] = None
    coordinate: Optional[Coordinate] = None
    website: Optional[str] = None


@dataclass(frozen=True)
class PoiSearch:
    """Outcome of a category search, including which fallback answered it."""
    results: Tuple[PointOfInterest, ...]
    searched_community: str
    searched_type: str
    fallback_used: Optional[str] = None
    regional_contact: Optional[RegionalContact] = None


@dataclass(frozen=True)
class PointsOfInterest:
    """One explicit slot per category the briefing shows."""
    fire_department: Optional[PoiSearch] = None
    hospital: Optional[PoiSearch] = None
    rcmp: Optional[PoiSearch] = None
    grocery_store: Optional[PoiSearch] = None
    hotel: Optional[PoiSearch] = None


@dataclass(frozen=True)
class WaterSource:
    name: str
    source_type: str
    coordinate: Coordinate
    distance_km: float
    access_notes: Optional[str] = None


@dataclass(frozen=True)
class Employer:
    name: str
    employer_type: str
    coordinate: Coordinate
    distance_km: float
    address: Optional[str] = None
    employee_estimate: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class CommunityOps:
    """
    Local operational knowledge for a community.

    Nested entries are plain read-only mappings copied from the static
    table; ``data_available`` is False for communities not in the table.
    """
    community: str
    data_available: bool
    eoc_contacts: Tuple[Dict[str, Any], ...] = ()
    raws_station: Optional[Dict[str, Any]] = None
    fuel_and_mechanical: Tuple[Dict[str, Any], ...] = ()
    staging_areas: Tuple[Dict[str, Any], ...] = ()
    access_constraints: Tuple[str, ...] = ()
    infrastructure: Optional[Dict[str, Any]] = None
    heavy_equipment_contractors: Tuple[Dict[str, Any], ...] = ()
    ess_reception_centre: Optional[Dict[str, Any]] = None
    weather_and_topo: Optional[Dict[str, Any]] = None
    air_support: Optional[Dict[str, Any]] = None
    hospital_trauma_level: Optional[str] = None
    message: Optional[str] = None
    last_updated: Optional[str] = None
    disclaimer: Optional[str] = None


@dataclass(frozen=True)
class RoadEvent:
    event_id: str
    event_type: str
    severity: RoadSeverity
    headline: str
    description: str
    road_name: str
    status: str
    direction: Optional[str] = None
    coordinate: Optional[Coordinate] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


# ---------------------------------------------------------------------------
# Root aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BriefingRecord:
    """
    The assembled dispatch briefing.

    Built once per request by the briefing builder and never mutated.
    Optional fields are None when their provider failed or timed out;
    ``unavailable_sections`` names those domains.
    """
    community: str
    generated_at: datetime
    fire_number: Optional[str] = None
    location: Optional[GeocodeMatch] = None
    travel: Optional[TravelInfo] = None
    specific_fire: Optional[Fire] = None
    nearby_fires: Optional[Tuple[Fire, ...]] = None
    weather: Optional[WeatherReport] = None
    first_nations: Optional[Tuple[FirstNation, ...]] = None
    first_nations_disclaimer: Optional[str] = None
    points_of_interest: PointsOfInterest = field(default_factory=PointsOfInterest)
    regional_contact: Optional[RegionalContact] = None
    water_sources: Optional[Tuple[WaterSource, ...]] = None
    major_employers: Optional[Tuple[Employer, ...]] = None
    community_ops: Optional[CommunityOps] = None
    road_events: Optional[Tuple[RoadEvent, ...]] = None
    unavailable_sections: Tuple[str, ...] = ()
