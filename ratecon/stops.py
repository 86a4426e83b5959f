"""
Stop-local extraction: date, time, timezone and address inside one stop window.
"""

import re
from re import Pattern
from typing import Iterator, List, NamedTuple, Tuple

from . import patterns as P
from .address import clean_address, is_blacklisted
from .models import Stop
from .segmenter import StopMarker


# ── Date ────────────────────────────────────────────────────────────

def normalize_date(month: str, day: str, year: str) -> str:
    return f"{int(month):02d}.{int(day):02d}.{year}"


def extract_date(window: str) -> str:
    match = P.DATE_PATTERN.search(window)
    if not match:
        return ""
    return normalize_date(*match.groups())


# ── Time ────────────────────────────────────────────────────────────

def normalize_time(raw: str) -> str:
    """
    Normalize a captured time to 24-hour HH:MM.

    TBD / ASAP / FCFS pass through uppercased. "1400" and "1400 hrs" become
    "14:00"; "2:00 PM" becomes "14:00"; "12:15 AM" becomes "00:15".
    """
    if not raw:
        return ""
    clean = raw.strip()
    if clean.upper() in P.TIME_SENTINELS:
        return clean.upper()

    clean = P.TIME_LABEL_PREFIX.sub("", clean)
    clean = P.TIME_HOURS_SUFFIX.sub("", clean)

    # Ranges like "08:00-16:00" keep the opening time
    clean = re.split(r'\s*-\s*', clean, maxsplit=1)[0]

    meridiem = P.TIME_MERIDIEM.search(clean)
    is_pm = bool(meridiem) and meridiem.group(1).upper() == "P"
    is_am = bool(meridiem) and meridiem.group(1).upper() == "A"
    clean = P.TIME_MERIDIEM.sub("", clean).strip()

    if re.fullmatch(r'\d{4}', clean):
        return f"{clean[:2]}:{clean[2:]}"

    match = re.fullmatch(r'(\d{1,2}):(\d{2})', clean)
    if match:
        hours, minutes = int(match.group(1)), match.group(2)
        if is_pm and hours < 12:
            hours += 12
        if is_am and hours == 12:
            hours = 0
        return f"{hours:02d}:{minutes}"

    return clean


def extract_timezone(window: str) -> str:
    match = P.TIMEZONE_PATTERN.search(window)
    return match.group(1) if match else ""


def extract_time(window: str) -> str:
    """First time in the window, with the window's timezone appended when present."""
    match = P.TIME_PATTERN.search(window)
    if not match:
        return ""
    time = normalize_time(match.group("military") or match.group("clock"))
    if not time or time in P.TIME_SENTINELS:
        return time
    tz = extract_timezone(window)
    return f"{time} {tz}" if tz else time


# ── Address ─────────────────────────────────────────────────────────

class AddressCandidate(NamedTuple):
    start: int
    end: int
    text: str


def _trim_labeled_line(line: str) -> str:
    """Drop trailing fields that share the label's line ("... TX 76701 Phone: ...")."""
    next_field = P.ADDRESS_LABEL_NEXT_FIELD.search(line)
    if next_field:
        line = line[:next_field.start()]
    postal = P.ADDRESS_LABEL_POSTAL_END.search(line)
    if postal:
        line = line[:postal.end()]
    return line.strip()


def _labeled_candidates(window: str) -> Iterator[AddressCandidate]:
    for match in P.ADDRESS_LABEL_PATTERN.finditer(window):
        line = _trim_labeled_line(match.group(1))
        if not P.ADDRESS_HAS_STREET_OR_STATE.search(line):
            continue
        end = match.end()
        # Street on the label line, "City, ST ZIP" on the next one
        if not P.CITY_STATE_PATTERN.search(line):
            rest = window[end:].lstrip("\n")
            city = P.CITY_STATE_PATTERN.match(rest.split("\n", 1)[0])
            if city:
                line = f"{line}, {city.group(0)}"
                end = len(window) - len(rest) + city.end()
        yield AddressCandidate(match.start(), end, line)


def _city_state_candidates(window: str) -> Iterator[AddressCandidate]:
    for match in P.CITY_STATE_PATTERN.finditer(window):
        city, state, postal = match.groups()
        yield AddressCandidate(match.start(), match.end(), f"{city}, {state} {postal or ''}".strip())


def _pattern_candidates(pattern: Pattern, window: str) -> Iterator[AddressCandidate]:
    for match in pattern.finditer(window):
        yield AddressCandidate(match.start(1), match.end(1), match.group(1))


def address_candidates(window: str) -> Iterator[AddressCandidate]:
    """Raw candidates in priority order: label, strict, loose, city/state."""
    yield from _labeled_candidates(window)
    yield from _pattern_candidates(P.ADDRESS_STRICT_PATTERN, window)
    yield from _pattern_candidates(P.ADDRESS_LOOSE_PATTERN, window)
    yield from _city_state_candidates(window)


def extract_address(window: str) -> str:
    """
    First candidate that survives cleaning.
    Text inside a blacklisted candidate is never reused by a weaker pattern.
    """
    rejected: List[Tuple[int, int]] = []
    for candidate in address_candidates(window):
        if any(candidate.start < end and start < candidate.end for start, end in rejected):
            continue
        address = clean_address(candidate.text)
        if address:
            return address
        if is_blacklisted(candidate.text):
            rejected.append((candidate.start, candidate.end))
    return ""


# ── Stop ────────────────────────────────────────────────────────────

def extract_stop(window: str, marker: StopMarker, sequence: int) -> Stop:
    return Stop(
        type=marker.type,
        address=extract_address(window),
        date=extract_date(window),
        time=extract_time(window),
        label=marker.label,
        sequence=sequence,
    )
