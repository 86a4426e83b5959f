"""
Section Segmenter
Finds where each pickup / delivery stop begins and slices the text into
per-stop windows.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from . import patterns as P
from .models import StopType

logger = logging.getLogger(__name__)

TIER_GENERIC = 1
TIER_NUMBERED = 2


class StopMarker(NamedTuple):
    position: int
    type: StopType
    tier: int
    label: str = ""


def _kind_to_type(kind: str) -> StopType:
    if P.PICKUP_KINDS.match(kind.strip()):
        return StopType.PICKUP
    return StopType.DELIVERY


def _infer_type(text: str, start: int, number: int) -> StopType:
    """Guess the type of a bare "Stop #N" from the text that follows it."""
    ahead = text[start:start + P.KIND_LOOKAHEAD_CHARS].lower()
    pickup_idx = _first_index(ahead, P.PICKUP_KEYWORDS)
    delivery_idx = _first_index(ahead, P.DELIVERY_KEYWORDS)
    if pickup_idx is not None and (delivery_idx is None or pickup_idx < delivery_idx):
        return StopType.PICKUP
    if delivery_idx is not None:
        return StopType.DELIVERY
    return StopType.PICKUP if number == 1 else StopType.DELIVERY


def _first_index(text: str, keywords, start: int = 0) -> Optional[int]:
    found = [idx for idx in (text.find(k, start) for k in keywords) if idx != -1]
    return min(found) if found else None


# ── Marker Detection ────────────────────────────────────────────────

def find_numbered_markers(text: str) -> List[StopMarker]:
    markers = []

    # "Pickup 1 of 2" / "Delivery 2 of 2" / "Stop 1 of 3"
    for match in P.TIER2_MARKER_PATTERNS[0].finditer(text):
        kind, num, total = match.group("kind"), match.group("num"), match.group("total")
        if kind.lower() == "stop":
            stop_type = _infer_type(text, match.end(), int(num))
        else:
            stop_type = _kind_to_type(kind)
        label = f"{stop_type.value.capitalize()} {num} of {total}"
        markers.append(StopMarker(match.start(), stop_type, TIER_NUMBERED, label))

    # "Stop #1: Pickup" / bare "Stop #3"
    for match in P.TIER2_MARKER_PATTERNS[1].finditer(text):
        kind, num = match.group("kind"), match.group("num")
        if not kind and not match.group("hash"):
            continue
        if kind:
            stop_type = _kind_to_type(kind)
        else:
            stop_type = _infer_type(text, match.end(), int(num))
        label = f"Stop {num} - {stop_type.value.capitalize()}"
        markers.append(StopMarker(match.start(), stop_type, TIER_NUMBERED, label))

    return markers


def find_generic_markers(text: str) -> List[StopMarker]:
    return [
        StopMarker(match.start(), _kind_to_type(match.group("kind")), TIER_GENERIC)
        for match in P.TIER1_MARKER_PATTERN.finditer(text)
    ]


def find_fallback_markers(text: str) -> List[StopMarker]:
    """
    Unordered keyword sweep used when no marker pattern matched.
    Yields at most one pickup and one delivery marker.
    """
    lower = text.lower()
    markers = []

    pickup_idx = _first_index(lower, P.PICKUP_KEYWORDS)
    if pickup_idx is not None:
        markers.append(StopMarker(pickup_idx, StopType.PICKUP, 0))

    # Delivery is searched after the pickup when one was found
    delivery_idx = _first_index(lower, P.DELIVERY_KEYWORDS, pickup_idx or 0)
    if delivery_idx is not None and delivery_idx != pickup_idx:
        markers.append(StopMarker(delivery_idx, StopType.DELIVERY, 0))

    return markers


def _collapse(markers: List[StopMarker]) -> List[StopMarker]:
    """Sort by position and drop markers too close to an accepted one."""
    accepted: List[StopMarker] = []
    for marker in sorted(markers, key=lambda m: (m.position, -m.tier)):
        if accepted and marker.position - accepted[-1].position <= P.MARKER_MERGE_DISTANCE:
            continue
        accepted.append(marker)
    return accepted


def _has_address(window: str) -> bool:
    return any(
        pattern.search(window)
        for pattern in (
            P.ADDRESS_LABEL_PATTERN,
            P.ADDRESS_STRICT_PATTERN,
            P.ADDRESS_LOOSE_PATTERN,
            P.CITY_STATE_PATTERN,
        )
    )


def _merge_generic_runs(text: str, markers: List[StopMarker]) -> List[StopMarker]:
    """
    A generic marker directly after one of the same type, whose own window
    holds no address, is a field header inside the previous block
    ("Shipper:" followed by "Pickup Date:"). It is folded into that block.
    A second "Shipper:" with its own address stays a separate stop.
    """
    merged: List[StopMarker] = []
    for marker, window in slice_windows(text, markers):
        if merged and merged[-1].type == marker.type and not _has_address(window):
            continue
        merged.append(marker)
    return merged


def _assign_labels(markers: List[StopMarker]) -> List[StopMarker]:
    counts = {StopType.PICKUP: 0, StopType.DELIVERY: 0}
    labeled = []
    for marker in markers:
        counts[marker.type] += 1
        if marker.label:
            labeled.append(marker)
        else:
            label = f"{marker.type.value.capitalize()} {counts[marker.type]}"
            labeled.append(marker._replace(label=label))
    return labeled


def find_stop_markers(text: str) -> List[StopMarker]:
    """
    Locate every stop start, ordered by text position.

    Numbered markers are authoritative: when any exist, generic keyword
    markers are discarded entirely.
    """
    numbered = find_numbered_markers(text)
    if numbered:
        markers = _collapse(numbered)
    else:
        markers = _merge_generic_runs(text, _collapse(find_generic_markers(text)))

    if not markers:
        markers = find_fallback_markers(text)
        if markers:
            logger.debug("[Segmenter] no stop markers, keyword sweep found %d", len(markers))

    return _assign_labels(markers)


# ── Windows ─────────────────────────────────────────────────────────

def slice_windows(text: str, markers: List[StopMarker]) -> List[Tuple[StopMarker, str]]:
    """Window i spans from marker i to marker i+1; the last runs to end of text."""
    windows = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].position if i + 1 < len(markers) else len(text)
        windows.append((marker, text[marker.position:end]))
    return windows
