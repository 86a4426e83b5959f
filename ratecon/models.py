"""
Pydantic models for the parsed record and request/response schemas.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Immutable output record; JSON uses camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ── Parsed Record ───────────────────────────────────────────────────

class StopType(str, Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


class Stop(_Record):
    type: StopType
    address: str = ""
    date: str = ""
    time: str = ""
    label: str = ""
    sequence: int = Field(..., ge=1, description="1-based position among detected stops")


class ParsedRateCon(_Record):
    load_number: str = ""
    weight: str = ""
    rate: str = ""
    stops: Tuple[Stop, ...] = ()

    # Flat mirrors of the first pickup / last delivery
    pickup_time: str = ""
    pickup_date: str = ""
    origin_address: str = ""
    delivery_time: str = ""
    delivery_date: str = ""
    destination_address: str = ""

    raw_text_preview: str = ""

    @property
    def pickups(self) -> List[Stop]:
        return [s for s in self.stops if s.type == StopType.PICKUP]

    @property
    def deliveries(self) -> List[Stop]:
        return [s for s in self.stops if s.type == StopType.DELIVERY]


# ── Request Models ──────────────────────────────────────────────────

class ParseRequest(BaseModel):
    text: str = Field(..., description="Flat text recovered from a rate confirmation")


class FormatRequest(BaseModel):
    data: ParsedRateCon = Field(..., description="Parsed (and possibly corrected) record")
    truck_number: str = ""
    broker: str = ""
    team: str = "none"
    simplified_address: bool = False


# ── Response Models ─────────────────────────────────────────────────

class ParseResponse(BaseModel):
    filename: Optional[str] = None
    data: ParsedRateCon
    stop_count: int
    extraction_notes: List[str]


class FormatResponse(BaseModel):
    route: str
    notes: str
    chain: str
    rename: str
