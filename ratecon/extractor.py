"""
Rate Confirmation Extraction Module
Turns the flat text of a rate confirmation into a ParsedRateCon record.

Pipeline: normalize -> scalar fields -> stop markers -> per-stop windows ->
date/time/address per window -> dedupe -> flat legacy fields.
"""

import logging
from typing import List, Optional, Sequence

from .fields import extract_load_number, extract_rate, extract_weight
from .models import ParsedRateCon, Stop, StopType
from .normalizer import normalize_text
from .segmenter import find_stop_markers, slice_windows
from .stops import extract_stop

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200

LEGACY_FIELDS = (
    "load_number", "weight", "rate", "pickup_time", "pickup_date",
    "origin_address", "delivery_time", "destination_address",
)


# ── Stops ───────────────────────────────────────────────────────────

def extract_stops(text: str) -> List[Stop]:
    markers = find_stop_markers(text)
    return [
        extract_stop(window, marker, sequence)
        for sequence, (marker, window) in enumerate(slice_windows(text, markers), start=1)
    ]


def dedupe_stops(stops: Sequence[Stop]) -> List[Stop]:
    """
    Keep the first stop for each address; stops without an address are kept.
    Sequence numbers are reassigned to stay contiguous.
    """
    seen = set()
    unique = []
    for stop in stops:
        if stop.address:
            if stop.address in seen:
                continue
            seen.add(stop.address)
        unique.append(stop)
    return [s.model_copy(update={"sequence": i}) for i, s in enumerate(unique, start=1)]


def _primary_pickup(stops: Sequence[Stop]) -> Optional[Stop]:
    pickups = [s for s in stops if s.type == StopType.PICKUP]
    for stop in pickups:
        if stop.address:
            return stop
    return pickups[0] if pickups else None


def _final_delivery(stops: Sequence[Stop]) -> Optional[Stop]:
    """Last delivery with an address: the final drop on multi-stop loads."""
    deliveries = [s for s in stops if s.type == StopType.DELIVERY]
    for stop in reversed(deliveries):
        if stop.address:
            return stop
    return deliveries[0] if deliveries else None


# ── Entry Point ─────────────────────────────────────────────────────

def parse_rate_confirmation(text: str) -> ParsedRateCon:
    """
    Parse the flat text of a rate confirmation.
    Never raises: fields that cannot be found are left as empty strings.
    """
    if not isinstance(text, str):
        text = ""

    normalized = normalize_text(text)
    stops = dedupe_stops(extract_stops(normalized))
    pickup = _primary_pickup(stops)
    delivery = _final_delivery(stops)

    result = ParsedRateCon(
        load_number=extract_load_number(normalized),
        weight=extract_weight(normalized),
        rate=extract_rate(normalized),
        stops=tuple(stops),
        pickup_time=pickup.time if pickup else "",
        pickup_date=pickup.date if pickup else "",
        origin_address=pickup.address if pickup else "",
        delivery_time=delivery.time if delivery else "",
        delivery_date=delivery.date if delivery else "",
        destination_address=delivery.address if delivery else "",
        raw_text_preview=text[:PREVIEW_CHARS] + "...",
    )

    logger.debug(
        "[Extractor] parsed %d chars: %d stops, load=%r",
        len(text), len(stops), result.load_number,
    )
    return result


def summarize(result: ParsedRateCon) -> List[str]:
    """Human-readable notes on which fields were found."""
    found = [f for f in LEGACY_FIELDS if getattr(result, f)]
    missing = [f for f in LEGACY_FIELDS if not getattr(result, f)]

    notes = [
        "Extraction method: pattern-based",
        f"Fields found: {len(found)}/{len(LEGACY_FIELDS)}",
        f"Stops detected: {len(result.stops)}",
    ]
    if missing:
        notes.append(f"Missing fields: {', '.join(missing)}")
    return notes
