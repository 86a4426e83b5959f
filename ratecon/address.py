"""
Address cleaning and validation.
"""

from . import patterns as P


def strip_noise(candidate: str) -> str:
    """Remove stacked leading labels ("SHIPPER: LOCATION: ...") and tidy whitespace."""
    if not candidate:
        return ""
    val = P.ADDRESS_INNER_WS.sub(" ", candidate).strip()
    val = P.ADDRESS_NOISE_PREFIX.sub("", val)
    return P.ADDRESS_TRAILING_NOISE.sub("", val).strip()


def is_blacklisted(address: str) -> bool:
    upper = address.upper()
    return any(bad in upper for bad in P.ADDRESS_BLACKLIST)


def clean_address(candidate: str) -> str:
    """
    Clean a raw address candidate.
    Returns "" when the result is boilerplate or too short to be an address.
    """
    val = strip_noise(candidate)
    if len(val) < P.ADDRESS_MIN_LENGTH:
        return ""
    if is_blacklisted(candidate) or is_blacklisted(val):
        return ""
    return val
