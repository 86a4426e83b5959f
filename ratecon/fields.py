"""
Scalar Field Extraction Module
Extracts load number, weight and rate from the full document text.
"""

import logging
from re import Match, Pattern
from typing import List, NamedTuple, Optional, Sequence

from . import patterns as P

logger = logging.getLogger(__name__)


def _first_capture(text: str, pattern_list: Sequence[Pattern]) -> str:
    """
    Try each pattern in order and return the first non-empty capture.
    Patterns are ordered from most specific (labeled) to least specific.
    """
    for pattern in pattern_list:
        match = pattern.search(text)
        if match and match.group(1):
            val = match.group(1).strip()
            if val:
                return val
    return ""


# ── Load Number ─────────────────────────────────────────────────────

def extract_load_number(text: str) -> str:
    val = _first_capture(text, P.LOAD_NUMBER_PATTERNS)
    if val:
        logger.debug("[Fields] load number: %s", val)
    return val


# ── Weight ──────────────────────────────────────────────────────────

def normalize_weight(raw: str) -> str:
    """Strip thousands separators and append the LBS unit."""
    raw = (raw or "").replace(",", "").strip()
    return f"{raw} LBS" if raw else ""


def extract_weight(text: str) -> str:
    return normalize_weight(_first_capture(text, P.WEIGHT_PATTERNS))


# ── Rate ────────────────────────────────────────────────────────────

class RateCandidate(NamedTuple):
    value: str
    position: int
    score: int
    context: str


def _score_rate_match(match: Match, text: str) -> Optional[RateCandidate]:
    """
    Score one rate match by the signals around it.

    Signals:
    1. Currency symbol in the matched text (+)
    2. Currency code USD/CAD/GBP in the matched text (+)
    3. "total" / "agreed" in the anchor (+)
    4. Mileage, weight or piece count mentioned nearby (-)
    5. Implausibly small amount (-)
    """
    value = match.group("value").replace(",", "")
    try:
        amount = float(value)
    except ValueError:
        return None

    matched = match.group(0)
    groups = match.groupdict()
    anchor = (groups.get("anchor") or "").lower()

    line_start = text.rfind("\n", 0, match.start()) + 1
    line_end = text.find("\n", match.end())
    if line_end == -1:
        line_end = len(text)
    context_start = max(line_start, match.start() - P.RATE_CONTEXT_CHARS)
    context_end = min(line_end, match.end() + P.RATE_CONTEXT_AFTER_CHARS)
    context = text[context_start:context_end]

    score = 0
    if groups.get("symbol"):
        score += P.RATE_SYMBOL_BONUS
    if P.RATE_CURRENCY_CODE.search(matched):
        score += P.RATE_CODE_BONUS
    if "total" in anchor:
        score += P.RATE_TOTAL_BONUS
    if "agreed" in anchor:
        score += P.RATE_AGREED_BONUS
    if P.RATE_CONTEXT_NOISE.search(context):
        score += P.RATE_CONTEXT_PENALTY
    if amount < P.RATE_SMALL_VALUE_LIMIT:
        score += P.RATE_SMALL_VALUE_PENALTY

    return RateCandidate(value=value, position=match.start("value"), score=score, context=context)


def rate_candidates(text: str) -> List[RateCandidate]:
    """Enumerate every match of every rate pattern with its score."""
    candidates = []
    for pattern in P.RATE_PATTERNS:
        for match in pattern.finditer(text):
            candidate = _score_rate_match(match, text)
            if candidate is not None:
                candidates.append(candidate)
    return candidates


def select_rate(candidates: Sequence[RateCandidate]) -> str:
    """Highest score wins; ties go to the candidate found earliest in the text."""
    if not candidates:
        return ""
    best = min(candidates, key=lambda c: (-c.score, c.position))
    return best.value


def extract_rate(text: str) -> str:
    candidates = rate_candidates(text)
    rate = select_rate(candidates)
    if rate:
        logger.debug("[Fields] rate %s chosen from %d candidates", rate, len(candidates))
    return rate
