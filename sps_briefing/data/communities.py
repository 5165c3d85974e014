"""
BC COMMUNITY REFERENCE POINTS
Approximate town-centre coordinates, geocoder overrides and the island
regions reachable only by ferry.
"""

from types import MappingProxyType

from sps_briefing.data_models import Coordinate
from sps_briefing.geo import region_from_bounds

# --- KNOWN COMMUNITIES (lowercase name -> centre) ---
# Used for nearest-locality labels and nearest weather station lookup.
COMMUNITY_COORDINATES = MappingProxyType({
    '100 mile house': Coordinate(51.64, -121.29),
    'burns lake': Coordinate(54.23, -125.76),
    'campbell river': Coordinate(50.02, -125.25),
    'cranbrook': Coordinate(49.51, -115.77),
    'dawson creek': Coordinate(55.76, -120.24),
    'fort nelson': Coordinate(58.81, -122.70),
    'fort st john': Coordinate(56.25, -120.85),
    'golden': Coordinate(51.30, -116.97),
    'kamloops': Coordinate(50.67, -120.33),
    'kelowna': Coordinate(49.88, -119.49),
    'lillooet': Coordinate(50.69, -121.94),
    'mackenzie': Coordinate(55.34, -123.09),
    'merritt': Coordinate(50.11, -120.79),
    'nanaimo': Coordinate(49.17, -123.94),
    'nelson': Coordinate(49.49, -117.29),
    'pemberton': Coordinate(50.32, -122.80),
    'penticton': Coordinate(49.49, -119.59),
    'prince george': Coordinate(53.92, -122.75),
    'prince rupert': Coordinate(54.32, -130.32),
    'quesnel': Coordinate(52.98, -122.49),
    'revelstoke': Coordinate(51.00, -118.20),
    'salmon arm': Coordinate(50.70, -119.29),
    'smithers': Coordinate(54.78, -127.17),
    'squamish': Coordinate(49.70, -123.15),
    'terrace': Coordinate(54.52, -128.60),
    'vancouver': Coordinate(49.28, -123.12),
    'vanderhoof': Coordinate(54.02, -124.00),
    'vernon': Coordinate(50.27, -119.27),
    'victoria': Coordinate(48.43, -123.37),
    'whistler': Coordinate(50.12, -122.95),
    'williams lake': Coordinate(52.14, -122.14),
})

# --- GEOCODER OVERRIDES ---
# Names the upstream geocoders resolve to the wrong place (e.g. Whistler
# resolving to the mountain summit). Matched on lowercase, trimmed input.
GEOCODE_OVERRIDES = MappingProxyType({
    'whistler': {
        'coordinate': Coordinate(50.1163, -122.9574),
        'formatted_address': 'Whistler Village, Whistler, BC',
    },
    'whistler, bc': {
        'coordinate': Coordinate(50.1163, -122.9574),
        'formatted_address': 'Whistler Village, Whistler, BC',
    },
})

# --- FERRY-ONLY ISLAND REGIONS ---
# Rough bounding boxes. Crossing between an island and anywhere else
# (including a different island) implies a ferry.
ISLAND_REGIONS = MappingProxyType({
    'vancouver_island': region_from_bounds(min_lat=48.3, max_lat=50.8, min_lng=-128.5, max_lng=-123.3),
})
