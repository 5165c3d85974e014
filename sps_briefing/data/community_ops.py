"""
COMMUNITY OPERATIONAL DATA (BC)
Local knowledge for dispatch: EOC contacts, fuel, staging, access,
infrastructure, equipment, reception centres, terrain and air support.
Maintained by hand; verify before deployment.
Keys are lowercase community names with whitespace removed.
"""

from types import MappingProxyType

OPS_DATA_LAST_UPDATED = '2024-01-15'

OPS_DISCLAIMER = "Verify all operational data before deployment. Contact local EOC for current conditions."

COMMUNITY_OPS_DATA = MappingProxyType({
    'whistler': {
        'community': 'Whistler',
        'eoc_contacts': [
            {'organization': 'Resort Municipality of Whistler Emergency Program', 'email': 'emergency@whistler.ca', 'phone': '604-935-8100', 'notes': '24/7 Emergency Line'},
            {'organization': 'SLRD Emergency Operations', 'phone': '604-894-6371', 'email': 'emergency@slrd.bc.ca'},
        ],
        'raws_station': {'id': 'C45712', 'name': 'Whistler Mountain', 'notes': 'Check BC Wildfire RAWS data for current indices'},
        'fuel_and_mechanical': [
            {'name': 'Petro-Canada Whistler', 'type': 'fuel', 'is_24h': False, 'address': '4295 Blackcomb Way', 'phone': '604-932-1142'},
            {'name': 'Whistler Car Rental & Service', 'type': 'mechanical', 'is_24h': False, 'phone': '604-932-1236'},
            {'name': 'Husky Function Junction', 'type': 'fuel', 'is_24h': False, 'address': '1045 Millar Creek Rd'},
        ],
        'staging_areas': [
            {'name': 'Whistler Olympic Plaza', 'type': 'staging', 'address': '4365 Blackcomb Way', 'capacity': 'Large event capacity', 'notes': 'Central village location'},
            {'name': 'Whistler Health Care Centre Helipad', 'type': 'helipad', 'lat': 50.1199, 'lng': -122.9551, 'notes': 'Hospital helipad'},
            {'name': 'Meadow Park Sports Centre', 'type': 'both', 'address': '8107 Camino Dr', 'capacity': 'Large parking, field space', 'notes': 'Good for base camp'},
            {'name': 'Lost Lake Fields', 'type': 'staging', 'notes': 'Open area, trail access'},
        ],
        'access_constraints': [
            'Highway 99 (Sea-to-Sky) prone to rockfall, avalanche, and weather closures',
            'Single highway access - no alternate route from south',
            'Pemberton alternate route via Hwy 99 north (longer)',
            'Winter: chains may be required, check DriveBC',
        ],
        'infrastructure': {
            'power': 'BC Hydro - Whistler Substation',
            'telecom': 'TELUS primary, Rogers secondary',
            'notes': 'Microwave towers on Whistler and Blackcomb mountains',
        },
        'heavy_equipment_contractors': [
            {'name': 'Whistler Excavating', 'services': 'Excavators, loaders', 'phone': '604-932-4453', 'location': 'Function Junction'},
            {'name': 'Nesters Equipment Rentals', 'services': 'General equipment', 'phone': '604-932-9366'},
        ],
        'ess_reception_centre': {
            'name': 'Myrtle Philip Community School',
            'address': '6195 Lorimer Rd, Whistler',
            'phone': '604-905-2581',
            'capacity': '500+ persons',
        },
        'weather_and_topo': {
            'prevailing_winds': 'Valley channeling from south (Squamish) and north (Pemberton); strong afternoon upslope winds',
            'topo_notes': 'Alpine terrain, steep valley walls. Cheakamus River valley runs N-S. Elevations from 650m (village) to 2200m+ (alpine)',
            'hazard_tree_risk': 'Moderate in lower valley forests; post-storm wind-throw risk',
            'beetle_kill': 'Low - coastal climate less affected',
        },
        'air_support': {
            'nearest_tanker_base': 'Abbotsford Air Tanker Base (seasonal)',
            'nearest_rappel_base': 'Kamloops or Campbell River',
            'local_helipads': ['Whistler Health Care Centre', 'Whistler Heli heliport (commercial)'],
            'notes': 'Good helicopter access; mountain flying considerations above treeline',
        },
        'hospital_trauma_level': 'Whistler Health Care Centre (Community-level, stabilize & transfer)',
    },
    'squamish': {
        'community': 'Squamish',
        'eoc_contacts': [
            {'organization': 'District of Squamish Emergency Program', 'email': 'emergencypreparedness@squamish.ca', 'phone': '604-815-5000'},
            {'organization': 'Squamish Fire Rescue', 'phone': '604-892-5228', 'notes': 'Non-emergency'},
        ],
        'raws_station': {
            'id': 'C45711', 'name': 'Squamish North', 'ffmc': 89, 'isi': 5, 'fwi': 13,
            'notes': 'Values shown are example - check BC Wildfire for current',
        },
        'fuel_and_mechanical': [
            {'name': 'Chevron Squamish', 'type': 'fuel', 'is_24h': True, 'address': '1900 Garibaldi Way', 'phone': '604-892-9106'},
            {'name': 'Squamish Towing Ltd', 'type': 'mechanical', 'is_24h': True, 'phone': '604-892-2140', 'notes': '24h towing & repairs'},
            {'name': 'Esso Squamish', 'type': 'fuel', 'is_24h': False, 'address': '38551 Loggers Lane'},
        ],
        'staging_areas': [
            {'name': 'Brennan Park Recreation Centre', 'type': 'both', 'address': '1009 Centennial Way', 'capacity': 'Large fields & parking', 'notes': 'Primary staging area'},
            {'name': 'Squamish General Hospital Helipad', 'type': 'helipad', 'lat': 49.7017, 'lng': -123.1558},
            {'name': 'Quest University Fields', 'type': 'staging', 'address': '3200 University Blvd', 'capacity': 'Large open area'},
            {'name': 'Squamish Airport', 'type': 'helipad', 'lat': 49.7833, 'lng': -123.1617, 'notes': 'Small aircraft & heli'},
        ],
        'access_constraints': [
            'Highway 99 prone to rockfall hazards and weather closures',
            'Squamish Valley Road can flood seasonally',
            'Single highway access from Vancouver',
            'Ferry backup via Horseshoe Bay if highway closed',
        ],
        'infrastructure': {
            'power': 'BC Hydro - Squamish Substation',
            'telecom': 'TELUS primary',
            'notes': 'Microwave tower at Smoke Bluffs; cell coverage good in town, spotty in valleys',
        },
        'heavy_equipment_contractors': [
            {'name': 'Mackenzie Earthworks Ltd.', 'services': 'Excavators, water tenders, heavy equipment', 'phone': '604-898-2588', 'location': 'Squamish'},
            {'name': 'Valley Equipment', 'services': 'General construction equipment', 'phone': '604-898-3366'},
        ],
        'ess_reception_centre': {
            'name': 'Brennan Park Recreation Centre',
            'address': '1009 Centennial Way',
            'phone': '604-898-3604',
            'capacity': '600+ persons',
        },
        'weather_and_topo': {
            'prevailing_winds': 'Predominantly southerly inflow winds from Howe Sound; canyon wind effects',
            'topo_notes': 'Steep valley walls, Howe Sound fjord geography. Squamish River delta. Strong outflow winds possible.',
            'hazard_tree_risk': 'Moderate wind-throw risk along forested slopes, especially post-storm',
            'beetle_kill': 'Low - coastal climate',
        },
        'air_support': {
            'nearest_tanker_base': 'Abbotsford Air Tanker Base (seasonal)',
            'nearest_rappel_base': 'Campbell River or Abbotsford',
            'local_helipads': ['Squamish General Hospital', 'Squamish Airport'],
            'notes': 'Regional support from Campbell River or Abbotsford (season dependent)',
        },
        'hospital_trauma_level': 'Squamish General Hospital (Community-level care; trauma transfers to Vancouver)',
    },
    'pemberton': {
        'community': 'Pemberton',
        'eoc_contacts': [
            {'organization': 'Village of Pemberton Emergency Program', 'phone': '604-894-6135', 'email': 'info@pemberton.ca'},
            {'organization': 'SLRD Emergency Operations', 'phone': '604-894-6371'},
        ],
        'raws_station': {'id': 'C45714', 'name': 'Pemberton Airport', 'notes': 'Check BC Wildfire RAWS for current indices'},
        'fuel_and_mechanical': [
            {'name': 'Pemberton Valley Supermarket (Petro-Canada)', 'type': 'fuel', 'is_24h': False, 'address': '1392 Portage Rd'},
            {'name': 'Pemberton Automotive', 'type': 'mechanical', 'is_24h': False, 'phone': '604-894-6812'},
        ],
        'staging_areas': [
            {'name': 'Pemberton Airport', 'type': 'both', 'lat': 50.3025, 'lng': -122.7378, 'notes': 'Runway & helipad'},
            {'name': 'Pemberton Secondary School', 'type': 'staging', 'address': '1195 School Rd', 'capacity': 'Fields & parking'},
            {'name': 'Pemberton Lions Park', 'type': 'staging', 'notes': 'Central location'},
        ],
        'access_constraints': [
            'Highway 99 only paved access from south (Whistler)',
            'Lillooet Road (unpaved) alternate to east',
            'Duffy Lake Road (Hwy 99 north) to Lillooet - winter conditions variable',
            "D'Arcy / Anderson Lake route to Lillooet (rough road)",
        ],
        'infrastructure': {
            'power': 'BC Hydro',
            'telecom': 'TELUS; limited cell coverage outside town core',
        },
        'heavy_equipment_contractors': [
            {'name': 'Sea to Sky Excavating', 'services': 'Excavators, trucks', 'location': 'Pemberton'},
        ],
        'ess_reception_centre': {
            'name': 'Pemberton Community Centre',
            'address': '7390 Cottonwood St',
            'phone': '604-894-6135',
        },
        'weather_and_topo': {
            'prevailing_winds': 'Valley winds; Pemberton Valley opens to northwest',
            'topo_notes': 'Broad agricultural valley floor surrounded by Coast Mountains. Lillooet River floodplain.',
            'hazard_tree_risk': 'Moderate in forested areas',
        },
        'air_support': {
            'nearest_tanker_base': 'Abbotsford',
            'local_helipads': ['Pemberton Airport', 'Pemberton Health Centre'],
            'notes': 'Good helicopter staging at airport',
        },
        'hospital_trauma_level': 'Pemberton Health Centre (Rural clinic; transfers to Whistler/Vancouver)',
    },
    'kamloops': {
        'community': 'Kamloops',
        'eoc_contacts': [
            {'organization': 'City of Kamloops Emergency Program', 'phone': '250-828-3499', 'email': 'emergency@kamloops.ca'},
            {'organization': 'Kamloops Fire Rescue', 'phone': '250-372-5131'},
            {'organization': 'BC Wildfire Service - Kamloops Fire Centre', 'phone': '250-554-5965'},
        ],
        'raws_station': {'id': 'C3B025', 'name': 'Kamloops Airport', 'notes': 'Fire Centre location - comprehensive fire weather data available'},
        'fuel_and_mechanical': [
            {'name': 'Husky Kamloops (Trans-Canada)', 'type': 'both', 'is_24h': True, 'address': 'Trans-Canada Hwy'},
            {'name': 'Petro-Canada Kamloops', 'type': 'fuel', 'is_24h': True},
            {'name': 'Lordco Kamloops', 'type': 'mechanical', 'is_24h': False, 'notes': 'Parts & service'},
        ],
        'staging_areas': [
            {'name': 'Kamloops Airport', 'type': 'both', 'notes': 'Air tanker base, major staging'},
            {'name': 'Interior Savings Centre', 'type': 'staging', 'capacity': 'Large event capacity'},
            {'name': 'McArthur Island Park', 'type': 'staging', 'notes': 'Large open area'},
            {'name': 'Royal Inland Hospital Helipad', 'type': 'helipad'},
        ],
        'access_constraints': [
            'Trans-Canada Highway (Hwy 1) main access E-W',
            'Highway 5 (Yellowhead) to north',
            'Highway 5A to Merritt south',
            'Multiple highway options provide good access',
        ],
        'infrastructure': {
            'power': 'BC Hydro - major substation',
            'telecom': 'TELUS, Rogers, Shaw - full coverage',
            'notes': 'Regional hub with robust infrastructure',
        },
        'heavy_equipment_contractors': [
            {'name': 'Finning CAT', 'services': 'Heavy equipment sales & service', 'location': 'Kamloops'},
            {'name': 'Interior Heavy Equipment', 'services': 'Excavators, graders, trucks'},
        ],
        'ess_reception_centre': {
            'name': 'Tournament Capital Centre',
            'address': '910 McGill Rd',
            'capacity': 'Large facility',
        },
        'weather_and_topo': {
            'prevailing_winds': 'Variable; Thompson River valley influences. Strong afternoon thermals.',
            'topo_notes': 'Semi-arid grasslands and dry forests. Thompson & North Thompson River confluence. Fire-prone ecosystem.',
            'hazard_tree_risk': 'High - dry conditions and beetle-affected stands',
            'beetle_kill': 'Significant mountain pine beetle impact in surrounding forests',
        },
        'air_support': {
            'nearest_tanker_base': 'Kamloops Air Tanker Base (on-site)',
            'nearest_rappel_base': 'Kamloops Rappel Base',
            'local_helipads': ['Kamloops Airport', 'Royal Inland Hospital'],
            'notes': 'Major fire response hub - air tanker and rappel base co-located',
        },
        'hospital_trauma_level': 'Royal Inland Hospital (Level 3 Trauma Centre)',
    },
    'kelowna': {
        'community': 'Kelowna',
        'eoc_contacts': [
            {'organization': 'City of Kelowna Emergency Program', 'phone': '250-469-8900', 'email': 'emergency@kelowna.ca'},
            {'organization': 'Kelowna Fire Department', 'phone': '250-469-8801'},
            {'organization': 'BC Wildfire Service - Southeast Fire Centre', 'phone': '250-558-1700'},
        ],
        'raws_station': {'id': 'C3B040', 'name': 'Kelowna Airport', 'notes': 'Airport station; additional stations throughout Okanagan'},
        'fuel_and_mechanical': [
            {'name': 'Costco Gas Kelowna', 'type': 'fuel', 'is_24h': False},
            {'name': 'Esso Kelowna (Highway 97)', 'type': 'fuel', 'is_24h': True},
            {'name': 'OK Tire Kelowna', 'type': 'mechanical', 'is_24h': False},
        ],
        'staging_areas': [
            {'name': 'Kelowna International Airport', 'type': 'both', 'notes': 'Air tanker capable'},
            {'name': 'Prospera Place', 'type': 'staging', 'capacity': '6,000+'},
            {'name': 'Kelowna General Hospital Helipad', 'type': 'helipad'},
            {'name': 'City Park', 'type': 'staging', 'notes': 'Downtown waterfront'},
        ],
        'access_constraints': [
            'Highway 97 main north-south corridor',
            'Highway 33 to Rock Creek (east)',
            'Okanagan Lake can isolate west side communities',
            'Bennett Bridge (Hwy 97) key crossing',
        ],
        'infrastructure': {
            'power': 'BC Hydro, FortisBC',
            'telecom': 'TELUS, Rogers, Shaw - excellent coverage',
        },
        'heavy_equipment_contractors': [
            {'name': 'Brandt Kelowna', 'services': 'John Deere equipment'},
            {'name': 'SMS Equipment', 'services': 'Heavy equipment rental'},
        ],
        'ess_reception_centre': {
            'name': 'Parkinson Recreation Centre',
            'address': '1800 Parkinson Way',
            'capacity': 'Large capacity',
        },
        'weather_and_topo': {
            'prevailing_winds': 'Lake effect; afternoon up-valley winds. Strong thermal activity.',
            'topo_notes': 'Okanagan Valley dry forest ecosystem. Interface zones throughout. Steep terrain on valley sides.',
            'hazard_tree_risk': 'High - dry conditions, interface zones',
            'beetle_kill': 'Significant pine beetle mortality in surrounding forests',
        },
        'air_support': {
            'nearest_tanker_base': 'Kamloops (primary); Penticton regional',
            'local_helipads': ['Kelowna Airport', 'Kelowna General Hospital', 'Various private'],
            'notes': 'Good air access; interface firefighting focus',
        },
        'hospital_trauma_level': 'Kelowna General Hospital (Level 3 Trauma Centre)',
    },
})
