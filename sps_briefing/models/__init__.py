"""
Request models for the HTTP API.
"""

from sps_briefing.models.request import (
    BriefingRequest,
    GeocodeRequest,
    RoadEventsRequest,
    RouteRequest,
)

__all__ = [
    "BriefingRequest",
    "GeocodeRequest",
    "RoadEventsRequest",
    "RouteRequest",
]
