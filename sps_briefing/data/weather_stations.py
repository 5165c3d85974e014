"""
ENVIRONMENT CANADA CITY FORECAST CODES (BC)
Feed URL format: https://weather.gc.ca/rss/city/bc-XX_e.xml
"""

from types import MappingProxyType

BC_CITY_CODES = MappingProxyType({
    '100 mile house': 'bc-7',
    'abbotsford': 'bc-81',
    'burns lake': 'bc-43',
    'campbell river': 'bc-19',
    'chilliwack': 'bc-24',
    'cranbrook': 'bc-77',
    'creston': 'bc-26',
    'dawson creek': 'bc-25',
    'fort nelson': 'bc-83',
    'fort st john': 'bc-78',
    'golden': 'bc-34',
    'grand forks': 'bc-39',
    'hope': 'bc-36',
    'kamloops': 'bc-45',
    'kelowna': 'bc-48',
    'kitimat': 'bc-30',
    'lillooet': 'bc-28',
    'mackenzie': 'bc-90',
    'merritt': 'bc-49',
    'nanaimo': 'bc-20',
    'nakusp': 'bc-38',
    'nelson': 'bc-37',
    'osoyoos': 'bc-69',
    'pemberton': 'bc-16',
    'penticton': 'bc-84',
    'port alberni': 'bc-46',
    'powell river': 'bc-58',
    'prince george': 'bc-79',
    'prince rupert': 'bc-57',
    'quesnel': 'bc-64',
    'revelstoke': 'bc-65',
    'salmon arm': 'bc-51',
    'smithers': 'bc-82',
    'squamish': 'bc-50',
    'terrace': 'bc-80',
    'trail': 'bc-71',
    'vancouver': 'bc-74',
    'vanderhoof': 'bc-44',
    'vernon': 'bc-27',
    'victoria': 'bc-85',
    'whistler': 'bc-86',
    'williams lake': 'bc-76',
})

# Nearest-station lookup only accepts stations within this many degrees
MAX_STATION_DISTANCE_DEG = 2.0

# Forecast periods kept (about three days, day and night)
MAX_FORECAST_PERIODS = 6
