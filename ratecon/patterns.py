"""
Pattern tables used by the extractors.
All tables are tuples compiled once at import and never mutated.
"""

import re

# ── Shared Fragments ────────────────────────────────────────────────

US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA", "HI",
    "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN",
    "MS", "MO", "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH",
    "OK", "OR", "PA", "PR", "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA",
    "WA", "WV", "WI", "WY",
)
CA_PROVINCES = (
    "AB", "BC", "MB", "NB", "NL", "NS", "NT", "NU", "ON", "PE", "QC", "SK", "YT",
)

_STATE = r'(?:' + '|'.join(US_STATES + CA_PROVINCES) + r')'
_POSTAL = r'(?:\d{5}(?:-\d{4})?|[A-Z]\d[A-Z] ?\d[A-Z]\d)'
_AMOUNT = r'\d{1,3}(?:,\d{3})+(?:\.\d{2})?|\d+(?:\.\d{2})?'

STREET_SUFFIXES = (
    "Street", "St", "Avenue", "Ave", "Road", "Rd", "Boulevard", "Blvd",
    "Drive", "Dr", "Lane", "Ln", "Court", "Ct", "Place", "Pl", "Parkway",
    "Pkwy", "Highway", "Hwy", "Way", "Circle", "Cir", "Terrace", "Ter",
    "Trail", "Trl", "Loop", "Pike", "Square", "Sq", "Freeway", "Fwy",
    "Expressway", "Expy", "Route", "Rte",
)
_SUFFIX = r'(?i:' + '|'.join(STREET_SUFFIXES) + r')'


# ── Scalar Fields ───────────────────────────────────────────────────

# Ordered most specific first; the first non-empty capture wins.
LOAD_NUMBER_PATTERNS = (
    re.compile(
        r'\b(?:Load\s*(?:#|No\.?|Number\b|ID\b)|Order\s*#|PO\s*#|PO\s*:|Order\s*:|'
        r'Shipment\s*ID\b|Pro\s*#|Reference\s*#|Confirmation\s*#|Trip\s*#)'
        r'\s*[:.]?\s*([A-Z0-9-]{4,})',
        re.IGNORECASE,
    ),
    re.compile(r'Ref\s*#\s*[:.]?\s*([A-Z0-9-]{4,})', re.IGNORECASE),
    re.compile(r'\b(\d{7,})\b'),
)

WEIGHT_PATTERNS = (
    re.compile(
        r'\b(?:Gross\s*Wt|Gross\s*Weight|Estimated\s*Weight|Total\s*Weight|Weight|Wt)\.?'
        r'\s*[:.]?\s*(\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?\s*(?:lbs?|pounds|kgs?)?',
        re.IGNORECASE,
    ),
    re.compile(r'\b(\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?\s*(?:lbs|LBS|pounds|kgs)\b'),
)

# Every match of every pattern is a rate candidate. Named groups:
#   anchor  label preceding the amount (may be absent)
#   symbol  currency symbol
#   value   the amount
#   code    trailing / leading currency code
RATE_PATTERNS = (
    re.compile(
        r'(?P<anchor>\b(?:Total\s*(?:Carrier\s*Pay|Rate|Pay|Amount|Charges?|Due)?|'
        r'Agreed\s*(?:Rate|Amount)?|Flat\s*Rate|Line\s*Haul|Carrier\s*Pay|Rate|Amount|Pay)\b)'
        r'\s*[:.=]?\s*(?P<precode>(?:USD|CAD|GBP)\s*)?(?P<symbol>[$£])?\s*'
        r'(?P<value>' + _AMOUNT + r')(?!\d|,\d)(?P<code>\s*(?:USD|CAD|GBP)\b)?',
        re.IGNORECASE,
    ),
    re.compile(
        r'(?P<symbol>[$£])\s*(?P<value>' + _AMOUNT + r')(?!\d|,\d)(?P<code>\s*(?:USD|CAD|GBP)\b)?',
    ),
)

RATE_SYMBOL_BONUS = 10
RATE_CODE_BONUS = 10
RATE_TOTAL_BONUS = 5
RATE_AGREED_BONUS = 5
RATE_CONTEXT_PENALTY = -20
RATE_SMALL_VALUE_PENALTY = -15
RATE_SMALL_VALUE_LIMIT = 50.0
RATE_CONTEXT_CHARS = 20
RATE_CONTEXT_AFTER_CHARS = 10

RATE_CURRENCY_CODE = re.compile(r'\b(?:USD|CAD|GBP)\b', re.IGNORECASE)
RATE_CONTEXT_NOISE = re.compile(r'\b(?:miles?|weight|pieces?)\b', re.IGNORECASE)


# ── Stop Markers ────────────────────────────────────────────────────

_PICK = r'Pick\s*-?\s*up|Pick'
_DROP = r'Delivery|Deliver|Drop(?:\s*-?\s*off)?'
_PARTY = r'Shipper|Consignee|Receiver'

# Tier 2: explicit numbered stop framing.
TIER2_MARKER_PATTERNS = (
    # "Shipper - Pickup 1 of 2", "Delivery 2 of 2", "Stop 1 of 3"
    re.compile(
        r'(?:\b(?:' + _PARTY + r')\s*[-:]\s*)?'
        r'\b(?P<kind>' + _PICK + r'|' + _DROP + r'|Stop)\s*#?\s*(?P<num>\d{1,2})\s+of\s+(?P<total>\d{1,2})\b',
        re.IGNORECASE,
    ),
    # "Stop #1: Pickup", "Stop 2 - Delivery", bare "Stop #3"
    re.compile(
        r'\bStop\s*(?P<hash>#)?\s*(?P<num>\d{1,2})\b\s*[:.)-]?\s*'
        r'(?P<kind>(?:' + _PICK + r'|' + _DROP + r'|' + _PARTY + r')\b)?',
        re.IGNORECASE,
    ),
)

# Tier 1: generic anchor words followed by ":"/"-" or a table header word.
TIER1_MARKER_PATTERN = re.compile(
    r'\b(?P<kind>Shipper|Pick\s*-?\s*up|Origin|Consignee|Delivery|Destination|Receiver)\b'
    r'(?:\s*[:-]|\s+(?=(?:Date|Time|Address|Location|Appointment|Appt)\b))',
    re.IGNORECASE,
)

PICKUP_KINDS = re.compile(r'^(?:pick|shipper|origin)', re.IGNORECASE)

MARKER_MERGE_DISTANCE = 15
KIND_LOOKAHEAD_CHARS = 60

# Last-resort keyword sweep
PICKUP_KEYWORDS = ("shipper", "pick up", "pick-up", "pickup", "origin", "loading")
DELIVERY_KEYWORDS = ("consignee", "delivery", "dest", "drop", "unloading")


# ── Stop-Local Fields ───────────────────────────────────────────────

DATE_PATTERN = re.compile(r'\b(\d{1,2})[/.-](\d{1,2})[/.-](\d{4}|\d{2})\b')

TIME_SENTINELS = ("TBD", "ASAP", "FCFS")

_HHMM = r'(?:[01]\d|2[0-3])[0-5]\d'
_TIME_LABEL = r'(?:Appointment\s*Time|Appointment|Appt\.?|Time)'
TIME_PATTERN = re.compile(
    r'\b' + _TIME_LABEL + r'\s*[:.]?\s*(?P<military>' + _HHMM + r')\b(?![/.:-]\d)'
    r'|\b(?P<clock>\d{1,2}:\d{2}(?:\s*[AP]\.?M\b\.?)?|' + _HHMM + r'\s*hrs?\b|(?:TBD|ASAP|FCFS)\b)',
    re.IGNORECASE,
)
TIME_LABEL_PREFIX = re.compile(r'^' + _TIME_LABEL + r'\s*[:.]?\s*', re.IGNORECASE)
TIME_HOURS_SUFFIX = re.compile(r'\s*hrs?\b\.?', re.IGNORECASE)
TIME_MERIDIEM = re.compile(r'\s*([AP])\.?M\b\.?', re.IGNORECASE)

TIMEZONE_PATTERN = re.compile(
    r'\b(AKST|AKDT|EST|EDT|CST|CDT|MST|MDT|PST|PDT|HST|HDT|AST|ADT|NST|NDT)\b'
)


# ── Addresses ───────────────────────────────────────────────────────

# (a) explicit label, captured to end of line, then cut at the postal code
# or at the next "Label:" on the same line
ADDRESS_LABEL_PATTERN = re.compile(
    r'\b(?:Street\s*Address|Address|Addr\.?)\s*[:#-]\s*([^\n]{5,120})',
    re.IGNORECASE,
)
ADDRESS_LABEL_POSTAL_END = re.compile(r'\b' + _STATE + r',? +' + _POSTAL + r'(?![\dA-Za-z])')
ADDRESS_LABEL_NEXT_FIELD = re.compile(r'\s+[A-Z][A-Za-z]*(?: [A-Z][A-Za-z]*)?\s*:')
ADDRESS_HAS_STREET_OR_STATE = re.compile(r'\d|, *' + _STATE + r'\b')

# (b) street number + street + city + state + ZIP
ADDRESS_STRICT_PATTERN = re.compile(
    r'\b(\d{1,6}[A-Za-z]? +[A-Za-z0-9.#\'/ -]{2,60}?,? +[A-Za-z.\' -]{2,40}?,? +'
    + _STATE + r' +' + _POSTAL + r')(?![\dA-Za-z])'
)

# (c) street number + street-type suffix, city/state optional
ADDRESS_LOOSE_PATTERN = re.compile(
    r'\b(\d{1,6}[A-Za-z]? +(?:[A-Za-z0-9.\']+ +){0,5}?' + _SUFFIX + r'\b\.?'
    r'(?:,? +(?i:Suite|Ste|Unit)\.? *#?[A-Za-z0-9-]+)?'
    r'(?:,? +[A-Za-z.\' -]{2,40}?, *' + _STATE + r'\b(?: +' + _POSTAL + r')?)?)'
)

# (d) bare "City, ST [ZIP]"
CITY_STATE_PATTERN = re.compile(
    r'\b([A-Z][A-Za-z.\' ]{1,30}?), *(' + _STATE + r')\b(?: +(' + _POSTAL + r'))?'
)

# Leading label noise, stripped repeatedly. Short abbreviations are
# uppercase-only so place names like "Del Rio" survive.
ADDRESS_NOISE_PREFIX = re.compile(
    r'^(?:\s*(?:(?i:facility\s+name|facility|location|address|addr|shipper|consignee|'
    r'receiver|pick\s*-?\s*up|delivery|destination|origin|dispatcher|driver|trailer|'
    r'truck|rate|weight|date|time|stop\s*#?\s*\d*|name|info|information)|PU|DEL)'
    r'\b\s*[:#-]?\s*)+'
)
ADDRESS_TRAILING_NOISE = re.compile(r'[\s,;:-]+$')
ADDRESS_INNER_WS = re.compile(r'\s+')

# Known non-shipment addresses (factoring, remittance, instructions).
ADDRESS_BLACKLIST = (
    "1701 EDISON DR",
    "PO BOX",
    "P.O. BOX",
    "P O BOX",
    "REMIT TO",
    "PICKUP/DELIVERY",
    "PICK UP/DELIVERY",
    "PICK-UP/DELIVERY",
)
ADDRESS_MIN_LENGTH = 5
