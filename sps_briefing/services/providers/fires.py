"""
Active wildfires near a point, from the BC Wildfire Service current fire
points layer on BC OpenMaps (WFS).
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data_models import Coordinate, Fire
from sps_briefing.geo import rounded_distance_km
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

FIRE_LAYER = "WHSE_LAND_AND_NATURAL_RESOURCE.PROT_CURRENT_FIRE_PNTS_SP"
INCIDENT_URL = "https://wildfiresituation.nrs.gov.bc.ca/incidents/{fire_number}"


def parse_fire(feature: dict, center: Coordinate) -> Fire:
    props = feature["properties"]
    # Geometry is BC Albers; the attribute table carries WGS84 lat/lng
    coordinate = Coordinate(float(props["LATITUDE"]), float(props["LONGITUDE"]))
    fire_number = str(props["FIRE_NUMBER"])
    return Fire(
        fire_number=fire_number,
        name=props.get("GEOGRAPHIC_DESCRIPTION") or f"Fire {fire_number}",
        status=props.get("FIRE_STATUS") or "Unknown",
        size_hectares=float(props.get("CURRENT_SIZE") or 0),
        coordinate=coordinate,
        is_fire_of_note=props.get("FIRE_OF_NOTE_IND") == "Y",
        url=props.get("FIRE_URL") or INCIDENT_URL.format(fire_number=fire_number),
        cause=props.get("FIRE_CAUSE"),
        fire_centre=props.get("FIRE_CENTRE"),
        distance_km=rounded_distance_km(center, coordinate),
    )


def sort_fires(fires: List[Fire]) -> List[Fire]:
    """Fires of note first, then largest, then closest."""
    return sorted(fires, key=lambda f: (not f.is_fire_of_note, -f.size_hectares, f.distance_km, f.fire_number))


@provider("fires")
def fetch_fires(client: HttpClient, settings: Settings, center: Coordinate,
                radius_km: Optional[float] = None) -> List[Fire]:
    """
    Active fires within ``radius_km`` of ``center``.

    Args:
        client: Shared HTTP client
        settings: Engine settings
        center: Search centre
        radius_km: Search radius, defaults to settings.fires_radius_km

    Returns:
        Fires sorted fire-of-note first, then by size descending
    """
    radius_km = settings.fires_radius_km if radius_km is None else radius_km
    data = client.get_json(
        "BC Wildfire",
        settings.fires_url,
        params={
            "service": "WFS",
            "version": "1.0.0",
            "request": "GetFeature",
            "typeName": FIRE_LAYER,
            "outputFormat": "json",
            "CQL_FILTER": "FIRE_OUT_DATE IS NULL",
        },
    )

    fires = []
    for feature in data.get("features") or []:
        try:
            fire = parse_fire(feature, center)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed fire feature: {e!r}")
            continue
        if fire.distance_km <= radius_km:
            fires.append(fire)

    logger.info(f"Found {len(fires)} active fires within {radius_km:.0f} km")
    return sort_fires(fires)
