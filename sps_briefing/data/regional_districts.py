"""
BC REGIONAL DISTRICTS, COMMUNITY MAPPINGS AND POI SEARCH VOCABULARY
Contact numbers are district main lines, not 24h emergency lines.
"""

from types import MappingProxyType

# --- REGIONAL DISTRICT CONTACTS ---
BC_REGIONAL_DISTRICTS = MappingProxyType({
    'slrd': {'name': 'Squamish-Lillooet Regional District', 'phone': '604-894-6371', 'website': 'https://www.slrd.bc.ca'},
    'rdbn': {'name': 'Regional District of Bulkley-Nechako', 'phone': '250-692-3195', 'website': 'https://www.rdbn.bc.ca'},
    'rdco': {'name': 'Regional District of Central Okanagan', 'phone': '250-763-4918', 'website': 'https://www.rdco.com'},
    'tnrd': {'name': 'Thompson-Nicola Regional District', 'phone': '250-377-8673', 'website': 'https://www.tnrd.ca'},
    'csrd': {'name': 'Columbia Shuswap Regional District', 'phone': '250-832-8194', 'website': 'https://www.csrd.bc.ca'},
    'rdkb': {'name': 'Regional District of Kootenay Boundary', 'phone': '250-368-9148', 'website': 'https://www.rdkb.com'},
    'rdek': {'name': 'Regional District of East Kootenay', 'phone': '250-489-2791', 'website': 'https://www.rdek.bc.ca'},
    'rdck': {'name': 'Regional District of Central Kootenay', 'phone': '250-352-6665', 'website': 'https://www.rdck.ca'},
    'rdffg': {'name': 'Regional District of Fraser-Fort George', 'phone': '250-960-4400', 'website': 'https://www.rdffg.bc.ca'},
    'prrd': {'name': 'Peace River Regional District', 'phone': '250-784-3200', 'website': 'https://www.prrd.bc.ca'},
    'nrrd': {'name': 'North Coast Regional District', 'phone': '250-624-2002', 'website': 'https://www.ncrdbc.com'},
    'rdks': {'name': 'Regional District of Kitimat-Stikine', 'phone': '250-615-6100', 'website': 'https://www.rdks.bc.ca'},
    'crd': {'name': 'Capital Regional District', 'phone': '250-360-3000', 'website': 'https://www.crd.bc.ca'},
    'cvrd': {'name': 'Cowichan Valley Regional District', 'phone': '250-746-2500', 'website': 'https://www.cvrd.ca'},
    'rdn': {'name': 'Regional District of Nanaimo', 'phone': '250-390-4111', 'website': 'https://www.rdn.bc.ca'},
    'acrd': {'name': 'Alberni-Clayoquot Regional District', 'phone': '250-720-2700', 'website': 'https://www.acrd.bc.ca'},
    'strathcona': {'name': 'Strathcona Regional District', 'phone': '250-830-6700', 'website': 'https://www.srd.ca'},
    'mvrd': {'name': 'Metro Vancouver', 'phone': '604-432-6200', 'website': 'https://www.metrovancouver.org'},
    'fvrd': {'name': 'Fraser Valley Regional District', 'phone': '604-702-5000', 'website': 'https://www.fvrd.ca'},
    'scrd': {'name': 'Sunshine Coast Regional District', 'phone': '604-885-6800', 'website': 'https://www.scrd.ca'},
    'nord': {'name': 'Regional District of North Okanagan', 'phone': '250-550-3700', 'website': 'https://www.rdno.ca'},
    'rdos': {'name': 'Regional District of Okanagan-Similkameen', 'phone': '250-492-0237', 'website': 'https://www.rdos.bc.ca'},
    'crd_cariboo': {'name': 'Cariboo Regional District', 'phone': '250-392-3351', 'website': 'https://www.cariboord.ca'},
})

# --- COMMUNITY -> REGIONAL DISTRICT (lowercase keys, partial list) ---
COMMUNITY_TO_REGION = MappingProxyType({
    'pemberton': 'slrd',
    'whistler': 'slrd',
    'lillooet': 'slrd',
    'squamish': 'slrd',
    'burns lake': 'rdbn',
    'fort st james': 'rdbn',
    'vanderhoof': 'rdbn',
    'houston': 'rdbn',
    'smithers': 'rdbn',
    'kamloops': 'tnrd',
    'merritt': 'tnrd',
    'clearwater': 'tnrd',
    'salmon arm': 'csrd',
    'revelstoke': 'csrd',
    'golden': 'csrd',
    'nelson': 'rdck',
    'castlegar': 'rdck',
    'nakusp': 'rdck',
    'creston': 'rdck',
    'trail': 'rdkb',
    'grand forks': 'rdkb',
    'cranbrook': 'rdek',
    'invermere': 'rdek',
    'prince george': 'rdffg',
    'mackenzie': 'rdffg',
    'fort nelson': 'prrd',
    'fort st john': 'prrd',
    'dawson creek': 'prrd',
    'terrace': 'rdks',
    'kitimat': 'rdks',
    'prince rupert': 'nrrd',
    'kelowna': 'rdco',
    'west kelowna': 'rdco',
    'vernon': 'nord',
    'penticton': 'rdos',
    'osoyoos': 'rdos',
    'williams lake': 'crd_cariboo',
    'quesnel': 'crd_cariboo',
    '100 mile house': 'crd_cariboo',
    'victoria': 'crd',
    'duncan': 'cvrd',
    'nanaimo': 'rdn',
    'port alberni': 'acrd',
    'campbell river': 'strathcona',
    'vancouver': 'mvrd',
    'burnaby': 'mvrd',
    'richmond': 'mvrd',
    'surrey': 'mvrd',
    'chilliwack': 'fvrd',
    'abbotsford': 'fvrd',
    'hope': 'fvrd',
    'gibsons': 'scrd',
    'sechelt': 'scrd',
})

# --- POI QUERY VARIATIONS ("try hard" searches, most specific first) ---
POI_VARIATIONS = MappingProxyType({
    'fire department': (
        'Fire Department',
        'Fire Rescue',
        'Fire Hall',
        'Volunteer Fire Department',
        'Fire Protection District',
        'Fire Services',
    ),
    'hospital': (
        'Hospital',
        'Health Centre',
        'Medical Centre',
        'Health Unit',
        'Diagnostic & Treatment Centre',
    ),
    'rcmp': (
        'RCMP',
        'RCMP Detachment',
        'Police',
        'Police Station',
    ),
    'grocery store': (
        'Grocery Store',
        'Supermarket',
        'Food Market',
        'General Store',
        'IGA',
        'Save-On-Foods',
        'Safeway',
        'No Frills',
    ),
    'hotel': (
        'Hotel',
        'Motel',
        'Inn',
        'Lodge',
        'Resort',
        'Accommodation',
    ),
})

# Only the first N variations are tried against each nearby town
NEARBY_TOWN_VARIATIONS = 2

# --- NEARBY TOWNS FOR SMALL COMMUNITIES (fallback search order) ---
NEARBY_TOWNS = MappingProxyType({
    'birkenhead lake estates': ('Pemberton', "D'Arcy", 'Mount Currie'),
    "d'arcy": ('Pemberton', 'Lillooet'),
    'mount currie': ('Pemberton', 'Whistler'),
    'bralorne': ('Pemberton', 'Lillooet', 'Gold Bridge'),
    'gold bridge': ('Lillooet', 'Pemberton'),
    'valemount': ('Jasper', 'McBride', 'Blue River'),
    'mcbride': ('Valemount', 'Prince George'),
    'blue river': ('Clearwater', 'Valemount'),
    'clearwater': ('Kamloops', 'Blue River'),
    '100 mile house': ('Williams Lake', 'Lac La Hache'),
    'lac la hache': ('100 Mile House', 'Williams Lake'),
    'fort st james': ('Vanderhoof', 'Prince George'),
    'houston': ('Burns Lake', 'Smithers'),
    'granisle': ('Burns Lake', 'Houston'),
    'fraser lake': ('Burns Lake', 'Vanderhoof'),
    'enderby': ('Salmon Arm', 'Armstrong', 'Vernon'),
    'armstrong': ('Vernon', 'Enderby'),
    'lumby': ('Vernon', 'Cherryville'),
    'osoyoos': ('Oliver', 'Penticton'),
    'oliver': ('Osoyoos', 'Penticton'),
    'princeton': ('Merritt', 'Keremeos'),
    'keremeos': ('Princeton', 'Penticton'),
    'lytton': ('Lillooet', 'Merritt', 'Hope'),
    'ashcroft': ('Cache Creek', 'Kamloops'),
    'cache creek': ('Ashcroft', 'Kamloops'),
    'chetwynd': ('Dawson Creek', 'Tumbler Ridge'),
    'tumbler ridge': ('Chetwynd', 'Dawson Creek'),
    "hudson's hope": ('Chetwynd', 'Fort St John'),
    'pouce coupe': ('Dawson Creek',),
    'stewart': ('Terrace', 'Kitimat'),
    'hazelton': ('Smithers', 'Terrace'),
    'new hazelton': ('Smithers', 'Terrace'),
})

# --- PROVINCIAL LAST-RESORT CONTACTS ---
PROVINCIAL_EMERGENCY = MappingProxyType({
    'name': 'BC Emergency Services',
    'address': 'For emergencies dial 911. For non-emergency: 1-800-663-3456',
    'phone': '911',
})

PROVINCIAL_SUGGESTED_CONTACTS = (
    MappingProxyType({'organization': 'BC Emergency Management', 'phone': '1-800-663-3456'}),
    MappingProxyType({'organization': 'BC Wildfire Service', 'phone': '1-888-336-7378'}),
)


def region_key_for(community: str):
    """Regional district key for a community name, or None."""
    return COMMUNITY_TO_REGION.get(community.lower().strip())
