"""
Aggregation Orchestrator.

Resolves the destination, then fans out one task per briefing domain on a
thread pool and joins them against a single deadline. A domain that fails
or misses the deadline becomes an absent section; only an unresolvable
destination is fatal.
"""

import dataclasses
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Union

from sps_briefing.config import Settings
from sps_briefing.data_models import (
    BriefingRecord,
    Coordinate,
    Disambiguation,
    GeocodeMatch,
    ProviderResult,
    TravelInfo,
)
from sps_briefing.errors import LocationNotFound
from sps_briefing.services.briefing_builder import TRAVEL, build_record
from sps_briefing.services.geocoder import Geocoder
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers import (
    fetch_community_ops,
    fetch_employers,
    fetch_fires,
    fetch_first_nations,
    fetch_hotels,
    fetch_poi,
    fetch_road_events,
    fetch_water_sources,
    fetch_weather,
)
from sps_briefing.services.route_computer import RouteComputer, format_travel_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BriefingContext:
    """What every domain task gets to see."""
    community: str
    location: Coordinate
    fire_number: Optional[str] = None
    origin: Optional[Coordinate] = None


ProviderCall = Callable[[BriefingContext], ProviderResult]

# --- POI CATEGORIES (domain name -> search category) ---
POI_DOMAINS = {
    "poi_fire_department": "fire department",
    "poi_hospital": "hospital",
    "poi_rcmp": "rcmp",
    "poi_grocery_store": "grocery store",
    "poi_hotel": "hotel",
}


def default_providers(client: HttpClient, settings: Settings) -> Dict[str, ProviderCall]:
    """The production domain registry, one entry per briefing section."""

    def poi_call(category: str) -> ProviderCall:
        return lambda ctx: fetch_poi(client, settings, category, ctx.community, near=ctx.location)

    def road_events_call(ctx: BriefingContext) -> ProviderResult:
        if ctx.origin is not None:
            return fetch_road_events(client, settings, origin=ctx.origin, destination=ctx.location)
        return fetch_road_events(client, settings, center=ctx.location)

    registry: Dict[str, ProviderCall] = {
        "fires": lambda ctx: fetch_fires(client, settings, ctx.location),
        "weather": lambda ctx: fetch_weather(client, settings, ctx.community, near=ctx.location),
        "first_nations": lambda ctx: fetch_first_nations(client, settings, ctx.location),
        "employers": lambda ctx: fetch_employers(client, settings, ctx.location),
        "water_sources": lambda ctx: fetch_water_sources(client, settings, ctx.location),
        "community_ops": lambda ctx: fetch_community_ops(ctx.community),
        "road_events": road_events_call,
    }
    for domain, category in POI_DOMAINS.items():
        registry[domain] = poi_call(category)
    return registry


class BriefingOrchestrator:
    """
    Builds a BriefingRecord for a community.

    A new thread pool is created per briefing and discarded afterwards, so
    nothing is shared between requests.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[HttpClient] = None,
                 providers: Optional[Dict[str, ProviderCall]] = None,
                 geocoder: Optional[Geocoder] = None, route_computer: Optional[RouteComputer] = None):
        self.settings = settings or Settings.from_env()
        self.client = client or HttpClient(self.settings)
        self.providers = providers if providers is not None else default_providers(self.client, self.settings)
        self.geocoder = geocoder or Geocoder(self.client, self.settings)
        self.route_computer = route_computer or RouteComputer(self.client, self.settings)

    def build_briefing(self, community: str, fire_number: Optional[str] = None,
                       origin: Union[Coordinate, str, None] = None) -> Union[BriefingRecord, Disambiguation]:
        """
        Assemble a dispatch briefing.

        Args:
            community: Destination community as entered
            fire_number: Optional incident number to single out
            origin: Optional departure point, a Coordinate or free text

        Returns:
            BriefingRecord, or a Disambiguation when the destination or the
            origin matched several places

        Raises:
            LocationNotFound: if the destination cannot be geocoded
        """
        destination = self.geocoder.resolve(community)
        if isinstance(destination, Disambiguation):
            return destination

        origin_point, origin_label, origin_issue = self._resolve_origin(origin)
        if isinstance(origin_point, Disambiguation):
            return origin_point

        context = BriefingContext(
            community=community.strip(),
            location=destination.coordinate,
            fire_number=fire_number,
            origin=origin_point,
        )
        logger.info(f"Building briefing for {context.community} at {context.location.label()}"
                    f"{' from ' + (origin_label or origin_point.label()) if origin_point else ''}")

        results = self._fan_out(context, destination, origin_label)
        if origin_issue is not None:
            results[TRAVEL] = ProviderResult.failure(origin_issue)

        record = build_record(
            community=context.community,
            generated_at=datetime.now(timezone.utc),
            location=destination,
            results=results,
            fire_number=fire_number,
        )
        if record.unavailable_sections:
            logger.warning(f"Briefing for {context.community} missing: {', '.join(record.unavailable_sections)}")
        return record

    def _resolve_origin(self, origin: Union[Coordinate, str, None]):
        """Returns (point or Disambiguation, label, reason travel info is missing)."""
        if origin is None:
            return None, None, None
        if isinstance(origin, Coordinate):
            # Directions get the exact point; the rounded label is display only
            return origin, None, None
        if not origin.strip():
            return None, None, None

        try:
            resolved = self.geocoder.resolve(origin)
        except LocationNotFound as e:
            logger.warning(f"Origin could not be geocoded, travel info dropped: {e}")
            return None, None, f"origin not found: {origin.strip()}"

        if isinstance(resolved, Disambiguation):
            return dataclasses.replace(resolved, target="origin"), None, None
        return resolved.coordinate, resolved.formatted_address, None

    def _fan_out(self, context: BriefingContext, destination: GeocodeMatch,
                 origin_label: Optional[str]) -> Dict[str, ProviderResult]:
        deadline = self.settings.orchestrator_deadline
        executor = ThreadPoolExecutor(max_workers=self.settings.max_workers,
                                      thread_name_prefix="briefing")
        try:
            futures: Dict[str, Future] = {
                domain: executor.submit(call, context) for domain, call in self.providers.items()
            }
            if context.origin is not None:
                futures[TRAVEL] = executor.submit(
                    self._travel_task, context, destination.formatted_address, origin_label,
                )

            done, not_done = wait(futures.values(), timeout=deadline)
            if not_done:
                logger.warning(f"{len(not_done)} briefing task(s) missed the {deadline:.1f}s deadline")

            results: Dict[str, ProviderResult] = {}
            for domain in sorted(futures):
                results[domain] = self._collect(domain, futures[domain], done, deadline)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        if TRAVEL in results and not results[TRAVEL].ok:
            # Route estimates never fail; a slow directions call still gets the haversine figure
            estimate = self.route_computer.estimate(
                context.origin, context.location, origin_label, destination.formatted_address,
            )
            results[TRAVEL] = ProviderResult.success(format_travel_info(
                estimate, origin_label or context.origin.label(), destination.formatted_address,
            ))
        return results

    @staticmethod
    def _collect(domain: str, future: Future, done, deadline: float) -> ProviderResult:
        if future not in done:
            future.cancel()
            return ProviderResult.failure(f"timed out after {deadline:.1f}s")
        try:
            result = future.result()
        except Exception as e:
            logger.error(f"Briefing task '{domain}' raised: {e}", exc_info=True)
            return ProviderResult.failure(f"error: {e}")
        if not isinstance(result, ProviderResult):
            return ProviderResult.success(result)
        return result

    def _travel_task(self, context: BriefingContext, dest_label: str,
                     origin_label: Optional[str]) -> ProviderResult:
        estimate = self.route_computer.compute(context.origin, context.location, origin_label, dest_label)

        hotels = ()
        if estimate.overnight_point is not None:
            found = fetch_hotels(self.client, self.settings, estimate.overnight_point.coordinate)
            if found.ok:
                hotels = found.value

        info: TravelInfo = format_travel_info(
            estimate, origin_label or context.origin.label(), dest_label, hotels,
        )
        return ProviderResult.success(info)
