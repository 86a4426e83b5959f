"""
Rate confirmation field extraction.
"""

from .extractor import parse_rate_confirmation
from .models import ParsedRateCon, Stop, StopType

__all__ = ["parse_rate_confirmation", "ParsedRateCon", "Stop", "StopType"]
