"""
Output Formatting Module
Builds the route / notes / chain / rename strings from a verified record.
"""

import re

from .models import ParsedRateCon
from .patterns import STREET_SUFFIXES

TEAM_EMOJIS = {
    "green": "🟢",
    "purple": "🟣",
    "red": "🔴",
    "blue": "🔵",
    "none": "",
}

DATE_PLACEHOLDER = "MM.DD.YYYY"
REGION_PLACEHOLDER = "??"

_STATE_ZIP = re.compile(r'(?:,\s*|\s+)([A-Z]{2})\s*(\d{5}(?:-\d{4})?)$', re.IGNORECASE)
_AFTER_SUFFIX = re.compile(
    r'\b(?:' + '|'.join(STREET_SUFFIXES) + r')\.?\s*,?\s+(.*)$',
    re.IGNORECASE,
)
_REGION = re.compile(r',\s*([A-Z]{2})\b')


def _city_from(part_before: str) -> str:
    """Pull the city out of "street, city" or "street-suffix city"."""
    if "," in part_before:
        city = part_before.rsplit(",", 1)[1].strip()
        if city and not city.isdigit():
            return city
    match = _AFTER_SUFFIX.search(part_before)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return part_before


def format_address(address: str, simplified: bool = False) -> str:
    """
    Simplified mode reduces a full street address to "CITY, ST ZIP".
    Addresses without a trailing state + ZIP are returned unchanged.
    """
    if not simplified or not address:
        return address
    match = _STATE_ZIP.search(address)
    if not match:
        return address
    state, zip_code = match.groups()
    city = _city_from(address[:match.start()].strip())
    return f"{city.upper()}, {state.upper()} {zip_code}"


def get_region(address: str) -> str:
    match = _REGION.search(address or "")
    return match.group(1) if match else REGION_PLACEHOLDER


def _date_or_placeholder(data: ParsedRateCon) -> str:
    if not data.pickup_date:
        return DATE_PLACEHOLDER
    return re.sub(r'[/-]', '.', data.pickup_date)


def format_route(data: ParsedRateCon, simplified: bool = False) -> str:
    origin = format_address(data.origin_address or "Origin Not Found", simplified)
    destination = format_address(data.destination_address or "Dest Not Found", simplified)
    return f"{origin}\n{destination}".upper()


def generate_chain(data: ParsedRateCon, truck_number: str, broker: str, team: str = "none") -> str:
    """[EMOJI] TRUCK-OS-DS-DATE BROKER LOAD N"""
    emoji = TEAM_EMOJIS.get(team, "")
    lane = f"{get_region(data.origin_address)}-{get_region(data.destination_address)}"

    load_number = data.load_number
    if broker.upper() == "TRAFFIX" and not load_number.startswith("T"):
        load_number = f"T{load_number}"

    prefix = f"{emoji} " if emoji else ""
    return f"{prefix}{truck_number}-{lane}-{_date_or_placeholder(data)} {broker} LOAD {load_number}"


def generate_rename(data: ParsedRateCon, truck_number: str) -> str:
    """TRUCK-OS-DS-DATE-C"""
    origin_state = get_region(data.origin_address)
    dest_state = get_region(data.destination_address)
    return f"{truck_number}-{origin_state}-{dest_state}-{_date_or_placeholder(data)}-C"


def format_notes(data: ParsedRateCon, chain: str) -> str:
    return "\n".join([
        f"W{data.weight or '?'}",
        f"PU {data.pickup_time or '?'}",
        f"DEL {data.delivery_time or '?'}",
        chain,
    ])
