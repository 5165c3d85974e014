"""
FIRST NATIONS PRONUNCIATION HINTS (BC)
Approximate phonetic guides only, not authoritative pronunciations.
"""

from types import MappingProxyType

PRONUNCIATION_HINTS = MappingProxyType({
    'Líl̓wat': 'LEEL-wat',
    "Lil'wat": 'LEEL-wat',
    'Squamish': 'SKWAH-mish',
    'Sto:lo': 'STOH-loh',
    'Stó:lō': 'STOH-loh',
    'Musqueam': 'MUSK-wee-um',
    'Tsleil-Waututh': 'slay-WAH-tooth',
    'Tsawwassen': 'suh-WOSS-en',
    'Semiahmoo': 'sem-ee-AH-moo',
    'Katzie': 'KAT-zee',
    'Kwantlen': 'KWANT-len',
    'Matsqui': 'MAT-skwee',
    'Sumas': 'SOO-mas',
    "Sts'ailes": 'STAY-ulss',
    'Chehalis': 'chuh-HAY-lis',
    'Skwah': 'SKWAH',
    'Seabird Island': 'SEA-bird',
    'Yale': 'YALE',
    'Spuzzum': 'SPUH-zum',
    "Nlaka'pamux": 'ing-khla-KAP-muh',
    'Secwepemc': 'shuh-HWEP-muhk',
    "Tk'emlúps": 'tuh-KEM-loops',
    "Splats'in": 'SPLAT-sin',
    'Neskonlith': 'NES-kon-lith',
    'Adams Lake': 'AD-ums Lake',
    'Shuswap': 'SHOO-swap',
    'Okanagan': 'oh-kuh-NAH-gun',
    'Syilx': 'see-ILKS',
    'Similkameen': 'sih-MIL-kuh-meen',
    'Penticton Indian': 'pen-TIK-ton',
    'Osoyoos Indian': 'oh-SOY-oos',
    'Westbank': 'WEST-bank',
    'Okanagan Indian': 'oh-kuh-NAH-gun',
    'Ktunaxa': 'tuh-NAH-hah',
    'ʔaq̓am': 'AH-kum',
    'Tobacco Plains': 'tuh-BAK-oh Plains',
    'Sinixt': 'sin-EEKST',
    'Carrier': 'KAIR-ee-er',
    'Dakelh': 'duh-KELH',
    "Wet'suwet'en": 'wet-SOO-wet-en',
    'Gitxsan': 'git-KSAN',
    "Nisga'a": 'NISS-gah',
    'Tsimshian': 'TSIM-shee-an',
    'Haida': 'HI-dah',
    'Heiltsuk': 'HALE-tsuk',
    'Nuxalk': 'NOO-halk',
    "Kwakwaka'wakw": 'kwok-wok-yah-WOKW',
    'Nuu-chah-nulth': 'noo-CHAH-noolth',
    'Coast Salish': 'Coast SAY-lish',
    "Tsilhqot'in": 'sil-KOH-tin',
    'Chilcotin': 'chil-KOH-tin',
    "St'at'imc": 'stat-LEE-umk',
    'Tahltan': 'TAL-tan',
    'Kaska': 'KAS-kuh',
    'Dene': 'DEH-nay',
    'Dunne-za': 'dun-NAY-zah',
})

PRONUNCIATION_NOTE = "Approximate phonetic guide - please verify with community"

PRONUNCIATION_DISCLAIMER = (
    "Pronunciation guides are approximate phonetic hints only. They are not "
    "authoritative and may not reflect traditional or community-preferred "
    "pronunciations. When in doubt, respectfully ask community members for guidance."
)


def pronunciation_for(name: str):
    """Exact match first, then the first hint whose key appears in the name."""
    if name in PRONUNCIATION_HINTS:
        return PRONUNCIATION_HINTS[name]
    lowered = name.lower()
    for key, hint in PRONUNCIATION_HINTS.items():
        if key.lower() in lowered:
            return hint
    return None
