"""Community operational data lookup from the static table."""

import copy
import logging
import re

from sps_briefing.data.community_ops import COMMUNITY_OPS_DATA, OPS_DATA_LAST_UPDATED, OPS_DISCLAIMER
from sps_briefing.data.regional_districts import PROVINCIAL_SUGGESTED_CONTACTS
from sps_briefing.data_models import CommunityOps
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)


def ops_key(community: str) -> str:
    return re.sub(r"\s+", "", community.lower().strip())


@provider("community_ops")
def fetch_community_ops(community: str) -> CommunityOps:
    """
    Operational bundle for a community.

    Unknown communities are not a failure: they return
    ``data_available=False`` with provincial contacts instead.
    """
    entry = COMMUNITY_OPS_DATA.get(ops_key(community))
    if entry is None:
        logger.info(f"No operational data for {community!r}")
        return CommunityOps(
            community=community,
            data_available=False,
            eoc_contacts=tuple(dict(c) for c in PROVINCIAL_SUGGESTED_CONTACTS),
            message=(
                f"Operational data not yet available for {community}. "
                "Contact local emergency management for details."
            ),
        )

    # Copy so callers cannot reach back into the shared table
    entry = copy.deepcopy(dict(entry))
    return CommunityOps(
        community=entry["community"],
        data_available=True,
        eoc_contacts=tuple(entry.get("eoc_contacts", ())),
        raws_station=entry.get("raws_station"),
        fuel_and_mechanical=tuple(entry.get("fuel_and_mechanical", ())),
        staging_areas=tuple(entry.get("staging_areas", ())),
        access_constraints=tuple(entry.get("access_constraints", ())),
        infrastructure=entry.get("infrastructure"),
        heavy_equipment_contractors=tuple(entry.get("heavy_equipment_contractors", ())),
        ess_reception_centre=entry.get("ess_reception_centre"),
        weather_and_topo=entry.get("weather_and_topo"),
        air_support=entry.get("air_support"),
        hospital_trauma_level=entry.get("hospital_trauma_level"),
        last_updated=OPS_DATA_LAST_UPDATED,
        disclaimer=OPS_DISCLAIMER,
    )
