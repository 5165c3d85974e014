"""
Runtime configuration.

Settings are read from environment variables. Every value has a default
so the engine runs without any configuration; Google-backed features
(directions, places) are simply skipped when no API key is present.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Engine settings. Use ``Settings.from_env()`` to load from the environment."""
    google_api_key: Optional[str] = None

    bc_geocoder_url: str = "https://geocoder.api.gov.bc.ca/addresses.json"
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    directions_url: str = "https://maps.googleapis.com/maps/api/directions/json"
    places_text_url: str = "https://places.googleapis.com/v1/places:searchText"
    places_nearby_url: str = "https://places.googleapis.com/v1/places:searchNearby"
    fires_url: str = "https://openmaps.gov.bc.ca/geo/pub/ows"
    first_nations_url: str = "https://geo.aadnc-aandc.gc.ca/cippn-fnpim/WmsLayer/executeWfsQuery"
    first_nations_alt_url: str = "https://geo.aadnc-aandc.gc.ca/cippn-fnpim/ows"
    road_events_url: str = "https://api.open511.gov.bc.ca/events"
    weather_url_template: str = "https://weather.gc.ca/rss/city/{code}_e.xml"

    provider_timeout: float = 5.0
    max_workers: int = 16

    fires_radius_km: float = 100.0
    first_nations_radius_km: float = 100.0
    employers_radius_km: float = 50.0
    water_radius_km: float = 50.0
    road_events_radius_km: float = 50.0
    hotels_radius_km: float = 50.0

    user_agent: str = "sps-briefing/1.0 (dispatch briefing engine)"
    log_dir: str = "logs"
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: (
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``SPS_*`` environment variables."""
        defaults = cls()
        origins = os.getenv("SPS_CORS_ORIGINS")
        return cls(
            google_api_key=os.getenv("SPS_GOOGLE_API_KEY") or os.getenv("GOOGLE_PLACES_API_KEY"),
            bc_geocoder_url=os.getenv("SPS_BC_GEOCODER_URL", defaults.bc_geocoder_url),
            nominatim_url=os.getenv("SPS_NOMINATIM_URL", defaults.nominatim_url),
            directions_url=os.getenv("SPS_DIRECTIONS_URL", defaults.directions_url),
            places_text_url=os.getenv("SPS_PLACES_TEXT_URL", defaults.places_text_url),
            places_nearby_url=os.getenv("SPS_PLACES_NEARBY_URL", defaults.places_nearby_url),
            fires_url=os.getenv("SPS_FIRES_URL", defaults.fires_url),
            first_nations_url=os.getenv("SPS_FIRST_NATIONS_URL", defaults.first_nations_url),
            first_nations_alt_url=os.getenv("SPS_FIRST_NATIONS_ALT_URL", defaults.first_nations_alt_url),
            road_events_url=os.getenv("SPS_ROAD_EVENTS_URL", defaults.road_events_url),
            weather_url_template=os.getenv("SPS_WEATHER_URL_TEMPLATE", defaults.weather_url_template),
            provider_timeout=_env_float("SPS_PROVIDER_TIMEOUT", defaults.provider_timeout),
            max_workers=_env_int("SPS_MAX_WORKERS", defaults.max_workers),
            fires_radius_km=_env_float("SPS_FIRES_RADIUS_KM", defaults.fires_radius_km),
            first_nations_radius_km=_env_float("SPS_FIRST_NATIONS_RADIUS_KM", defaults.first_nations_radius_km),
            employers_radius_km=_env_float("SPS_EMPLOYERS_RADIUS_KM", defaults.employers_radius_km),
            water_radius_km=_env_float("SPS_WATER_RADIUS_KM", defaults.water_radius_km),
            road_events_radius_km=_env_float("SPS_ROAD_EVENTS_RADIUS_KM", defaults.road_events_radius_km),
            hotels_radius_km=_env_float("SPS_HOTELS_RADIUS_KM", defaults.hotels_radius_km),
            user_agent=os.getenv("SPS_USER_AGENT", defaults.user_agent),
            log_dir=os.getenv("SPS_LOG_DIR", defaults.log_dir),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) if origins else defaults.cors_origins,
        )

    @property
    def orchestrator_deadline(self) -> float:
        """Overall wait for the fan-out; providers may chain two calls."""
        return self.provider_timeout * 2
