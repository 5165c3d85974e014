"""
Weather for a community from Environment Canada city forecast feeds.

The feed is Atom XML with one entry per current-conditions block,
warning and forecast period. Entry text is lightly structured prose, so
individual values are pulled out with regular expressions.
"""

import html
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import List, Optional

from sps_briefing.config import Settings
from sps_briefing.data.communities import COMMUNITY_COORDINATES
from sps_briefing.data.weather_stations import (
    BC_CITY_CODES,
    MAX_FORECAST_PERIODS,
    MAX_STATION_DISTANCE_DEG,
)
from sps_briefing.data_models import Coordinate, CurrentConditions, ForecastPeriod, WeatherReport
from sps_briefing.errors import ProviderUnavailable
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.providers.base import provider

logger = logging.getLogger(__name__)

ATOM = "{http://www.w3.org/2005/Atom}"

_TAG = re.compile(r"<[^>]+>")
_TEMPERATURE = re.compile(r"(-?\d+(?:\.\d+)?)\s*°C")
_HUMIDITY = re.compile(r"Humidity:\s*(\d+)\s*%", re.IGNORECASE)
_WIND = re.compile(r"Wind:\s*(.+?)(?:\s+Air Quality|\s+Wind Chill|\s+Humidex|$)", re.IGNORECASE)
_CONDITION = re.compile(r"Condition:\s*(.+?)(?:\s+Temperature:|$)", re.IGNORECASE)
_DAY = re.compile(r"^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)(\s+night)?:", re.IGNORECASE)
_HIGH = re.compile(r"High\s+(minus\s+|plus\s+)?(\d+)", re.IGNORECASE)
_LOW = re.compile(r"Low\s+(minus\s+|plus\s+)?(\d+)", re.IGNORECASE)
_POP = re.compile(r"POP\s+(\d+)\s*%|(\d+)\s*percent\s+chance", re.IGNORECASE)
_ALERT = re.compile(r"WARNING|WATCH|ADVISORY|ALERT", re.IGNORECASE)
_NO_ALERTS = re.compile(r"^No watches or warnings", re.IGNORECASE)


def station_for(community: Optional[str], near: Optional[Coordinate] = None) -> Optional[str]:
    """
    Forecast city code for a community.

    Tries an exact name match, then a partial match either way, then
    the nearest known community to ``near`` within a couple of degrees.
    """
    if community:
        key = community.lower().strip()
        if key in BC_CITY_CODES:
            return BC_CITY_CODES[key]
        for city, code in BC_CITY_CODES.items():
            if city in key or key in city:
                return code

    if near is not None:
        best_city, best_distance = None, math.inf
        for city, coord in COMMUNITY_COORDINATES.items():
            # Flat degree distance is good enough to pick a station
            distance = math.hypot(near.lat - coord.lat, near.lng - coord.lng)
            if distance < best_distance:
                best_city, best_distance = city, distance
        if best_city is not None and best_distance < MAX_STATION_DISTANCE_DEG:
            return BC_CITY_CODES.get(best_city)
    return None


def _plain(text: Optional[str]) -> str:
    return re.sub(r"\s+", " ", html.unescape(_TAG.sub(" ", text or ""))).strip()


def _signed(match) -> Optional[int]:
    if not match:
        return None
    value = int(match.group(2))
    sign = (match.group(1) or "").strip().lower()
    return -value if sign == "minus" else value


def parse_current(title: str, summary: str) -> CurrentConditions:
    temperature = _TEMPERATURE.search(title) or _TEMPERATURE.search(summary)
    humidity = _HUMIDITY.search(summary)
    wind = _WIND.search(summary)
    condition = _CONDITION.search(summary)
    return CurrentConditions(
        temperature_c=float(temperature.group(1)) if temperature else None,
        condition=condition.group(1).strip() if condition else None,
        humidity_pct=int(humidity.group(1)) if humidity else None,
        wind=wind.group(1).strip() if wind else None,
    )


def parse_forecast(title: str, summary: str) -> Optional[ForecastPeriod]:
    """Forecast period from a 'Friday: Mainly sunny. High minus 1.' title."""
    day = _DAY.match(title)
    if not day:
        return None
    pop = _POP.search(summary)
    return ForecastPeriod(
        day=day.group(1) + (day.group(2) or ""),
        summary=title.split(":", 1)[1].strip(),
        high_c=_signed(_HIGH.search(title)),
        low_c=_signed(_LOW.search(title)),
        pop_pct=int(pop.group(1) or pop.group(2)) if pop else None,
    )


def parse_feed(xml_text: str, station_code: str) -> WeatherReport:
    """
    Parse an Environment Canada city Atom feed.

    Raises:
        xml.etree.ElementTree.ParseError: if the feed is not XML
    """
    root = ET.fromstring(xml_text)
    feed_title = root.findtext(f"{ATOM}title") or ""
    location = feed_title.split(" - ")[0].strip() or "Unknown"

    current = None
    warnings: List[str] = []
    forecast: List[ForecastPeriod] = []

    for entry in root.iter(f"{ATOM}entry"):
        title = (entry.findtext(f"{ATOM}title") or "").strip()
        summary = _plain(entry.findtext(f"{ATOM}summary"))
        category = entry.find(f"{ATOM}category")
        term = category.get("term", "") if category is not None else ""

        if title.startswith("Current Conditions") or term == "Current Conditions":
            current = parse_current(title, summary)
        elif term == "Weather Forecasts":
            period = parse_forecast(title, summary)
            if period is not None:
                forecast.append(period)
        elif _ALERT.search(title) and not _NO_ALERTS.match(title):
            warnings.append(title)

    return WeatherReport(
        location=location,
        station_code=station_code,
        current=current,
        forecast=tuple(forecast[:MAX_FORECAST_PERIODS]),
        warnings=tuple(warnings),
    )


@provider("weather")
def fetch_weather(client: HttpClient, settings: Settings, community: str,
                  near: Optional[Coordinate] = None) -> WeatherReport:
    """Current conditions, warnings and a short forecast for a community."""
    code = station_for(community, near)
    if code is None:
        raise ProviderUnavailable("Environment Canada", f"no forecast station near {community!r}")

    xml_text = client.get_text("Environment Canada", settings.weather_url_template.format(code=code))
    report = parse_feed(xml_text, code)
    logger.info(f"Weather for {community}: station {code}, {len(report.forecast)} periods, {len(report.warnings)} warnings")
    return report
