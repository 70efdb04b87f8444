"""Seat template and seat map models"""

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

_RANGE_PATTERN = re.compile(r"^\s*(-?\d+)\s*-\s*(-?\d+)\s*$")


class SeatLayoutPreset(str, Enum):
    """Seeding used when a template declares no seat ranges."""
    MIXED = "mixed"
    ALL_FRONT = "all_front"
    ALL_BACK = "all_back"
    CUSTOM = "custom"


class SeatRangeConfig(BaseModel):
    """Seat numbering template of a coach or travel class"""
    total_seats: int = Field(0, description="Seat count of the coach")
    front_range: Optional[Tuple[int, int]] = Field(None, description="Inclusive front facing range")
    back_range: Optional[Tuple[int, int]] = Field(None, description="Inclusive back facing range")
    auto_back_fill: bool = Field(False, description="Back seats are the complement of front seats")
    layout: SeatLayoutPreset = Field(SeatLayoutPreset.CUSTOM, description="Preset used without ranges")

    @field_validator("total_seats", mode="before")
    @classmethod
    def _coerce_total(cls, value):
        if value is None or value == "":
            return 0
        try:
            value = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric seat count {value!r}")
            return 0
        return value if value > 0 else 0

    @field_validator("layout", mode="before")
    @classmethod
    def _coerce_layout(cls, value):
        if value is None or value == "":
            return SeatLayoutPreset.CUSTOM
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {p.value for p in SeatLayoutPreset}:
                logger.warning(f"Unknown seat layout {value!r}, treating as custom")
                return SeatLayoutPreset.CUSTOM
        return value

    @field_validator("front_range", "back_range", mode="before")
    @classmethod
    def _parse_range(cls, value):
        # CMS records store ranges as "1-30"
        if value is None or value == "":
            return None
        if isinstance(value, str):
            m = _RANGE_PATTERN.match(value)
            if not m:
                logger.warning(f"Ignoring unparseable seat range {value!r}")
                return None
            return int(m.group(1)), int(m.group(2))
        if isinstance(value, (list, tuple)) and len(value) != 2:
            logger.warning(f"Ignoring seat range {value!r}, expected two endpoints")
            return None
        return value

    @property
    def usable(self) -> bool:
        return self.total_seats > 0


class ClassifiedSeats(BaseModel):
    """Front/back partition of seats 1..total_seats"""
    total_seats: int = Field(0, description="Seat count")
    front: List[int] = Field(default_factory=list, description="Front facing seats, ascending")
    back: List[int] = Field(default_factory=list, description="Back facing seats, ascending")


class SeatRow(BaseModel):
    """One row of a band, split by the aisle"""
    row: int = Field(..., description="1-based row index within the band")
    left: List[int] = Field(default_factory=list, description="Seats left of the aisle")
    right: List[int] = Field(default_factory=list, description="Seats right of the aisle")


class SeatBand(BaseModel):
    """Seats sharing one orientation"""
    orientation: str = Field(..., description="front_facing or back_facing")
    seats: List[int] = Field(default_factory=list, description="All seats of the band")
    rows: List[SeatRow] = Field(default_factory=list, description="Rows of the band")


class SeatGrid(BaseModel):
    """Positional seat map, back band first"""
    seats_per_block: int = Field(5, description="Seats on each side of the aisle")
    bands: List[SeatBand] = Field(default_factory=list, description="Rendered bands")
