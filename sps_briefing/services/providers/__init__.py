"""
Provider Gateway.

Independent fetch functions, one per briefing data domain, all following
the fetch-or-null contract in ``base.provider``.
"""

from sps_briefing.services.providers.community_ops import fetch_community_ops
from sps_briefing.services.providers.employers import fetch_employers
from sps_briefing.services.providers.fires import fetch_fires
from sps_briefing.services.providers.first_nations import fetch_first_nations
from sps_briefing.services.providers.hotels import fetch_hotels
from sps_briefing.services.providers.poi import fetch_poi
from sps_briefing.services.providers.road_events import fetch_road_events
from sps_briefing.services.providers.water_sources import fetch_water_sources
from sps_briefing.services.providers.weather import fetch_weather

__all__ = [
    "fetch_community_ops",
    "fetch_employers",
    "fetch_fires",
    "fetch_first_nations",
    "fetch_hotels",
    "fetch_poi",
    "fetch_road_events",
    "fetch_water_sources",
    "fetch_weather",
]
