"""
First Nations communities near a point, from the Indigenous Services
Canada First Nations location WFS. The primary WFS endpoint is tried
first, then the generic OWS endpoint.
"""

import logging
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data.pronunciations import PRONUNCIATION_NOTE, pronunciation_for
from sps_briefing.data_models import Coordinate, FirstNation
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.geo import point_bbox, rounded_distance_km
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

SOURCE = "ISC First Nations"


def _query(client: HttpClient, settings: Settings, bbox_param: str) -> dict:
    try:
        return client.get_json(SOURCE, settings.first_nations_url, params={
            "service": "WFS",
            "version": "1.1.0",
            "request": "GetFeature",
            "typename": "cippn-fnpim:FN_Location_BC",
            "outputFormat": "json",
            "srsName": "EPSG:4326",
            "bbox": bbox_param,
        })
    except ProviderUnavailable as e:
        logger.warning(f"Primary First Nations endpoint failed ({e.reason}), trying alternate")

    return client.get_json(SOURCE, settings.first_nations_alt_url, params={
        "service": "WFS",
        "version": "2.0.0",
        "request": "GetFeature",
        "typeNames": "FN_Location_BC",
        "outputFormat": "application/json",
        "srsName": "EPSG:4326",
        "bbox": f"{bbox_param},EPSG:4326",
    })


def parse_nation(feature: dict, center: Coordinate) -> FirstNation:
    props = feature.get("properties") or {}
    lng, lat = feature["geometry"]["coordinates"][:2]
    coordinate = Coordinate(float(lat), float(lng))
    name = props.get("BAND_NAME") or props.get("NAME") or "Unknown"
    pronunciation = pronunciation_for(name)
    return FirstNation(
        name=name,
        band_number=int(props.get("BAND_NUMBER") or 0),
        coordinate=coordinate,
        distance_km=rounded_distance_km(center, coordinate),
        pronunciation=pronunciation,
        pronunciation_note=PRONUNCIATION_NOTE if pronunciation else None,
    )


@provider("first_nations")
def fetch_first_nations(client: HttpClient, settings: Settings, center: Coordinate,
                        radius_km: Optional[float] = None) -> List[FirstNation]:
    """First Nations within ``radius_km``, closest first."""
    radius_km = settings.first_nations_radius_km if radius_km is None else radius_km
    data = _query(client, settings, point_bbox(center, radius_km).as_param())

    nations = []
    for feature in data.get("features") or []:
        try:
            nation = parse_nation(feature, center)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed First Nations feature: {e!r}")
            continue
        # The bbox is square; trim its corners
        if nation.distance_km <= radius_km:
            nations.append(nation)

    nations.sort(key=lambda n: (n.distance_km, n.name))
    return nations
