"""
SEED DATASETS: MAJOR EMPLOYERS AND FIREFIGHTING WATER ACCESS (BC)
Large employers matter for evacuation planning; water sources are lakes,
rivers, boat launches and beaches usable for drafting or bucketing.
Employee counts are rough public estimates.
"""

from types import MappingProxyType

_EMPLOYERS = [
    # Whistler Area
    {'name': 'Whistler Blackcomb (Vail Resorts)', 'type': 'Resort/Tourism', 'lat': 50.1163, 'lng': -122.9574, 'employee_estimate': '3,000+ seasonal', 'notes': 'Major ski resort'},
    {'name': 'Four Seasons Resort Whistler', 'type': 'Hospitality', 'lat': 50.1142, 'lng': -122.9548, 'employee_estimate': '300+', 'notes': 'Luxury hotel'},
    {'name': 'Fairmont Chateau Whistler', 'type': 'Hospitality', 'lat': 50.1166, 'lng': -122.9462, 'employee_estimate': '500+', 'notes': 'Major hotel'},
    {'name': 'Whistler Health Care Centre', 'type': 'Healthcare', 'lat': 50.1199, 'lng': -122.9551, 'employee_estimate': '100+', 'notes': 'Regional health'},
    # Squamish
    {'name': 'Sea to Sky Gondola', 'type': 'Tourism', 'lat': 49.6778, 'lng': -123.1556, 'employee_estimate': '100+', 'notes': 'Tourist attraction'},
    {'name': 'Squamish Terminals', 'type': 'Industrial', 'lat': 49.4689, 'lng': -123.1522, 'employee_estimate': '50+', 'notes': 'Port facility'},
    # Kamloops
    {'name': 'Interior Health Authority', 'type': 'Healthcare', 'lat': 50.6745, 'lng': -120.3273, 'employee_estimate': '2,500+', 'notes': 'Regional health authority'},
    {'name': 'Thompson Rivers University', 'type': 'Education', 'lat': 50.6706, 'lng': -120.3650, 'employee_estimate': '1,500+', 'notes': 'University'},
    {'name': 'Highland Valley Copper Mine', 'type': 'Mining', 'lat': 50.4833, 'lng': -121.0333, 'employee_estimate': '1,200+', 'notes': 'Major mine'},
    {'name': 'Domtar Kamloops Mill', 'type': 'Forestry', 'lat': 50.6667, 'lng': -120.3167, 'employee_estimate': '400+', 'notes': 'Pulp mill'},
    # Kelowna
    {'name': 'Kelowna General Hospital', 'type': 'Healthcare', 'lat': 49.8817, 'lng': -119.4847, 'employee_estimate': '3,000+', 'notes': 'Major hospital'},
    {'name': 'UBC Okanagan', 'type': 'Education', 'lat': 49.9400, 'lng': -119.3967, 'employee_estimate': '2,000+', 'notes': 'University'},
    {'name': 'Tolko Industries', 'type': 'Forestry', 'lat': 49.8667, 'lng': -119.4333, 'employee_estimate': '500+', 'notes': 'Forest products'},
    # Williams Lake / Cariboo
    {'name': 'Cariboo Memorial Hospital', 'type': 'Healthcare', 'lat': 52.1294, 'lng': -122.1353, 'employee_estimate': '300+', 'notes': 'Regional hospital'},
    {'name': 'West Fraser Mills', 'type': 'Forestry', 'lat': 52.1417, 'lng': -122.1250, 'employee_estimate': '400+', 'notes': 'Lumber mill'},
    {'name': 'Gibraltar Mine', 'type': 'Mining', 'lat': 52.5167, 'lng': -122.3667, 'employee_estimate': '800+', 'notes': 'Copper mine'},
    # Prince George
    {'name': 'University of Northern BC', 'type': 'Education', 'lat': 53.8939, 'lng': -122.8108, 'employee_estimate': '1,000+', 'notes': 'University'},
    {'name': 'Canfor PG Pulp Mill', 'type': 'Forestry', 'lat': 53.9333, 'lng': -122.7833, 'employee_estimate': '500+', 'notes': 'Pulp mill'},
    {'name': 'Prince George Regional Hospital', 'type': 'Healthcare', 'lat': 53.9167, 'lng': -122.7500, 'employee_estimate': '2,000+', 'notes': 'Northern health hub'},
    # Burns Lake / Bulkley
    {'name': 'Babine Forest Products', 'type': 'Forestry', 'lat': 54.2306, 'lng': -125.7611, 'employee_estimate': '200+', 'notes': 'Sawmill'},
    {'name': 'Lakes District Hospital', 'type': 'Healthcare', 'lat': 54.2333, 'lng': -125.7667, 'employee_estimate': '100+', 'notes': 'Regional hospital'},
    # Terrace / Kitimat
    {'name': 'Rio Tinto Alcan Smelter', 'type': 'Industrial', 'lat': 54.0500, 'lng': -128.6500, 'employee_estimate': '1,000+', 'notes': 'Aluminum smelter'},
    {'name': 'LNG Canada', 'type': 'Energy', 'lat': 54.0167, 'lng': -128.6833, 'employee_estimate': '500+ (construction)', 'notes': 'LNG facility'},
    {'name': 'Mills Memorial Hospital', 'type': 'Healthcare', 'lat': 54.5167, 'lng': -128.5833, 'employee_estimate': '300+', 'notes': 'Regional hospital'},
    # Fort St John / Northeast
    {'name': 'BC Hydro Site C', 'type': 'Energy/Construction', 'lat': 56.2000, 'lng': -120.9167, 'employee_estimate': '3,000+', 'notes': 'Dam construction'},
    {'name': 'Canadian Natural Resources', 'type': 'Oil & Gas', 'lat': 56.2500, 'lng': -120.8500, 'employee_estimate': '500+', 'notes': 'Energy sector'},
    # Kootenays
    {'name': 'Teck Trail Operations', 'type': 'Mining/Smelting', 'lat': 49.0833, 'lng': -117.7000, 'employee_estimate': '1,400+', 'notes': 'Lead-zinc smelter'},
    {'name': 'Selkirk College', 'type': 'Education', 'lat': 49.5000, 'lng': -117.2833, 'employee_estimate': '300+', 'notes': 'Regional college'},
    # Vancouver Island
    {'name': 'Port Alberni Mill', 'type': 'Forestry', 'lat': 49.2333, 'lng': -124.8000, 'employee_estimate': '400+', 'notes': 'Paper mill'},
    {'name': 'Nanaimo Regional Hospital', 'type': 'Healthcare', 'lat': 49.1667, 'lng': -123.9333, 'employee_estimate': '1,500+', 'notes': 'Regional hospital'},
    {'name': 'Vancouver Island University', 'type': 'Education', 'lat': 49.1556, 'lng': -123.9683, 'employee_estimate': '1,000+', 'notes': 'University'},
]

_WATER_SOURCES = [
    # Sea-to-Sky - Lakes
    {'name': 'Green Lake', 'type': 'lake', 'lat': 50.1456, 'lng': -122.9478, 'access_notes': 'Road access via Valley Trail'},
    {'name': 'Alta Lake', 'type': 'lake', 'lat': 50.1167, 'lng': -122.9667, 'access_notes': 'Road access, boat launch'},
    {'name': 'Lost Lake', 'type': 'lake', 'lat': 50.1233, 'lng': -122.9417, 'access_notes': 'Trail access only'},
    {'name': 'Nita Lake', 'type': 'lake', 'lat': 50.0933, 'lng': -122.9683, 'access_notes': 'Road access via Nita Lake Dr'},
    {'name': 'Alpha Lake', 'type': 'lake', 'lat': 50.1017, 'lng': -122.9650, 'access_notes': 'Road access'},
    {'name': 'Cheakamus River', 'type': 'river', 'lat': 50.0833, 'lng': -123.0167, 'access_notes': 'Multiple road crossings'},
    {'name': 'Lillooet Lake', 'type': 'lake', 'lat': 50.3500, 'lng': -122.5500, 'access_notes': 'FSR access'},
    {'name': 'Garibaldi Lake', 'type': 'lake', 'lat': 49.9333, 'lng': -123.0333, 'access_notes': 'Helicopter access only'},
    # Sea-to-Sky - Boat Launches
    {'name': 'Alta Lake Boat Launch', 'type': 'boat launch', 'lat': 50.1150, 'lng': -122.9650, 'access_notes': 'Paved ramp, trailer parking'},
    {'name': 'Squamish River Boat Launch', 'type': 'boat launch', 'lat': 49.7500, 'lng': -123.1500, 'access_notes': 'Gravel ramp, good access'},
    {'name': 'Lillooet Lake Boat Launch (Pemberton)', 'type': 'boat launch', 'lat': 50.3667, 'lng': -122.5333, 'access_notes': 'FSR access, concrete ramp'},
    {'name': 'Porteau Cove Boat Launch', 'type': 'boat launch', 'lat': 49.5583, 'lng': -123.2375, 'access_notes': 'Provincial park, paved ramp'},
    # Sea-to-Sky - Beaches
    {'name': 'Nexen Beach (Squamish)', 'type': 'beach', 'lat': 49.6917, 'lng': -123.1583, 'access_notes': 'Public beach, good shore access'},
    {'name': 'Rainbow Park Beach', 'type': 'beach', 'lat': 50.1200, 'lng': -122.9633, 'access_notes': 'Alta Lake, road access'},
    {'name': 'Lakeside Park Beach', 'type': 'beach', 'lat': 50.1117, 'lng': -122.9583, 'access_notes': 'Alta Lake south end'},
    {'name': 'Alpha Lake Park Beach', 'type': 'beach', 'lat': 50.1033, 'lng': -122.9633, 'access_notes': 'Road access, parking'},
    # Thompson-Nicola - Lakes
    {'name': 'Kamloops Lake', 'type': 'lake', 'lat': 50.7833, 'lng': -120.5333, 'access_notes': 'Hwy 1 access'},
    {'name': 'Shuswap Lake', 'type': 'lake', 'lat': 50.9500, 'lng': -119.2833, 'access_notes': 'Multiple boat launches'},
    {'name': 'Adams Lake', 'type': 'lake', 'lat': 51.1000, 'lng': -119.6333, 'access_notes': 'Road access north end'},
    {'name': 'Nicola Lake', 'type': 'lake', 'lat': 50.1667, 'lng': -120.5500, 'access_notes': 'Hwy 5A access'},
    {'name': 'Thompson River', 'type': 'river', 'lat': 50.6833, 'lng': -120.3333, 'access_notes': 'Multiple access points'},
    # Thompson-Nicola - Boat Launches
    {'name': 'Shuswap Marina Boat Launch', 'type': 'boat launch', 'lat': 50.8833, 'lng': -119.4833, 'access_notes': 'Full service marina, paved ramp'},
    {'name': 'Scotch Creek Boat Launch', 'type': 'boat launch', 'lat': 51.0167, 'lng': -119.1333, 'access_notes': 'Provincial park, good ramp'},
    {'name': 'Riverside Park Boat Launch (Kamloops)', 'type': 'boat launch', 'lat': 50.6750, 'lng': -120.3250, 'access_notes': 'City park, paved ramp'},
    # Okanagan - Lakes
    {'name': 'Okanagan Lake', 'type': 'lake', 'lat': 49.8500, 'lng': -119.5000, 'access_notes': 'Multiple boat launches'},
    {'name': 'Kalamalka Lake', 'type': 'lake', 'lat': 50.1833, 'lng': -119.2667, 'access_notes': 'Vernon access'},
    {'name': 'Skaha Lake', 'type': 'lake', 'lat': 49.3667, 'lng': -119.5500, 'access_notes': 'Penticton access'},
    {'name': 'Wood Lake', 'type': 'lake', 'lat': 50.0833, 'lng': -119.3833, 'access_notes': 'Road access'},
    # Okanagan - Boat Launches
    {'name': 'Kelowna City Park Boat Launch', 'type': 'boat launch', 'lat': 49.8833, 'lng': -119.4917, 'access_notes': 'Downtown, paved double ramp'},
    {'name': 'Peachland Boat Launch', 'type': 'boat launch', 'lat': 49.7833, 'lng': -119.7333, 'access_notes': 'Public ramp, parking'},
    {'name': 'Skaha Lake Marina Boat Launch', 'type': 'boat launch', 'lat': 49.3833, 'lng': -119.5667, 'access_notes': 'South Penticton, good ramp'},
    # Okanagan - Beaches
    {'name': 'Okanagan Lake Beach (Kelowna)', 'type': 'beach', 'lat': 49.8867, 'lng': -119.4950, 'access_notes': 'City beach, good shore access'},
    {'name': 'Gyro Beach (Kelowna)', 'type': 'beach', 'lat': 49.8617, 'lng': -119.4867, 'access_notes': 'Popular public beach'},
    {'name': 'Skaha Beach (Penticton)', 'type': 'beach', 'lat': 49.4500, 'lng': -119.5833, 'access_notes': 'Large public beach'},
    # Cariboo
    {'name': 'Williams Lake', 'type': 'lake', 'lat': 52.1167, 'lng': -122.1333, 'access_notes': 'City access'},
    {'name': 'Quesnel Lake', 'type': 'lake', 'lat': 52.5000, 'lng': -121.0000, 'access_notes': 'FSR access'},
    {'name': 'Horsefly Lake', 'type': 'lake', 'lat': 52.3500, 'lng': -121.4167, 'access_notes': 'Road access'},
    # Kootenays
    {'name': 'Kootenay Lake', 'type': 'lake', 'lat': 49.6667, 'lng': -116.9167, 'access_notes': 'Multiple access points'},
    {'name': 'Arrow Lakes', 'type': 'lake', 'lat': 49.8333, 'lng': -117.9167, 'access_notes': 'Ferry crossings'},
    {'name': 'Columbia River', 'type': 'river', 'lat': 49.3167, 'lng': -117.6500, 'access_notes': 'Trail/Castlegar access'},
    # Northern BC
    {'name': 'Stuart Lake', 'type': 'lake', 'lat': 54.4167, 'lng': -124.2667, 'access_notes': 'Fort St James access'},
    {'name': 'Fraser Lake', 'type': 'lake', 'lat': 54.0500, 'lng': -124.8500, 'access_notes': 'Hwy 16 access'},
    {'name': 'Burns Lake', 'type': 'lake', 'lat': 54.2333, 'lng': -125.7667, 'access_notes': 'Town access'},
    {'name': 'Babine Lake', 'type': 'lake', 'lat': 55.1667, 'lng': -126.1000, 'access_notes': 'FSR access'},
    # Peace Region
    {'name': 'Charlie Lake', 'type': 'lake', 'lat': 56.3000, 'lng': -120.9667, 'access_notes': 'Hwy 97 access'},
    {'name': 'Moberly Lake', 'type': 'lake', 'lat': 55.8333, 'lng': -121.7667, 'access_notes': 'Road access'},
    # Vancouver Island
    {'name': 'Cowichan Lake', 'type': 'lake', 'lat': 48.8333, 'lng': -124.1667, 'access_notes': 'Road access'},
    {'name': 'Sproat Lake', 'type': 'lake', 'lat': 49.2833, 'lng': -125.0833, 'access_notes': 'Mars water bomber base'},
    {'name': 'Great Central Lake', 'type': 'lake', 'lat': 49.3500, 'lng': -125.3333, 'access_notes': 'FSR access'},
    {'name': 'Campbell Lake', 'type': 'lake', 'lat': 50.0333, 'lng': -125.3167, 'access_notes': 'Road access'},
]

BC_MAJOR_EMPLOYERS = tuple(MappingProxyType(e) for e in _EMPLOYERS)
BC_WATER_SOURCES = tuple(MappingProxyType(w) for w in _WATER_SOURCES)

# Live Places supplements: query text -> category label
EMPLOYER_SEARCH_TYPES = ('hospital', 'university', 'factory', 'mill')

# Only supplement the seed list when it has fewer than this many hits
EMPLOYER_SUPPLEMENT_THRESHOLD = 5

WATER_SEARCH_TYPES = MappingProxyType({
    'boat launch': 'boat launch',
    'public beach water access': 'beach',
    'water treatment plant': 'water treatment',
    'reservoir': 'reservoir',
})

MAX_SITES = 10
