"""Direction request and seat response models"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from .seat import SeatGrid


class Direction(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class DirectionReason(str, Enum):
    """Which resolution rule decided the direction."""
    EXPLICIT_FORWARD = "explicit_forward"
    EXPLICIT_REVERSE = "explicit_reverse"
    REVERSE_NUMBER = "reverse_number"
    ROUTE_CODE_FORWARD = "route_code_forward"
    ROUTE_CODE_REVERSE = "route_code_reverse"
    ROUTE_FORWARD = "route_forward"
    ROUTE_REVERSE = "route_reverse"
    DEFAULT_EVEN_NUMBER = "default_even_number"
    DEFAULT_ODD_NUMBER = "default_odd_number"
    DEFAULT_FORWARD = "default_forward"


class SeatDirectionRequest(BaseModel):
    """Seat direction lookup"""
    train: Optional[str] = Field(None, description="Primary number, reverse number or route code")
    direction: Optional[Direction] = Field(None, description="Explicit direction flag")
    from_station: Optional[str] = Field(None, description="Boarding station name or code")
    to_station: Optional[str] = Field(None, description="Alighting station name or code")
    coach: Optional[str] = Field(None, description="Restrict to one coach code")
    include_layout: bool = Field(False, description="Attach the rendered seat grid")

    @field_validator("train", "from_station", "to_station", "coach", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("direction", mode="before")
    @classmethod
    def _lower_direction(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


class DirectionInfo(BaseModel):
    """Resolved travel direction"""
    is_reverse: bool = Field(False, description="Reverse assignment applies")
    reason: DirectionReason = Field(DirectionReason.DEFAULT_FORWARD, description="Deciding rule")
    from_station: Optional[str] = Field(None, description="Start of travel, display title")
    to_station: Optional[str] = Field(None, description="End of travel, display title")
    confident: bool = Field(True, description="False when no rule matched")

    @property
    def direction(self) -> Direction:
        return Direction.REVERSE if self.is_reverse else Direction.FORWARD


class CoachSeats(BaseModel):
    """Seat orientation of one coach for one direction"""
    coach_code: str = Field(..., description="Coach code")
    travel_class: Optional[str] = Field(None, description="Travel class code")
    class_name: Optional[str] = Field(None, description="Travel class name")
    position: int = Field(0, description="Order within the train")
    total_seats: int = Field(0, description="Seat count")
    front_facing_seats: List[int] = Field(default_factory=list)
    back_facing_seats: List[int] = Field(default_factory=list)
    direction: Direction = Field(Direction.FORWARD)
    seat_data_available: bool = Field(True, description="False when no seat template was found")
    layout: Optional[SeatGrid] = Field(None, description="Rendered seat map")

    @computed_field
    @property
    def front_facing_count(self) -> int:
        return len(self.front_facing_seats)

    @computed_field
    @property
    def back_facing_count(self) -> int:
        return len(self.back_facing_seats)


class TrainSummary(BaseModel):
    """Train listing entry"""
    name: str
    number: str
    reverse_number: Optional[str] = None
    from_station: str = Field(..., description="Origin title")
    to_station: str = Field(..., description="Destination title")
    code_from_to: str = Field("", description="Forward route code")
    code_to_from: str = Field("", description="Reverse route code")
    direction: Optional[DirectionInfo] = Field(None, description="Direction matched by a route search")


class TrainSearchResult(BaseModel):
    """Train search result"""
    trains: List[TrainSummary] = Field(default_factory=list)
    total: int = Field(0)


class TrainSeats(BaseModel):
    """Seat orientation of a whole train for one direction"""
    train: TrainSummary
    direction: DirectionInfo
    route_code: str = Field("", description="Route code in travel direction")
    coaches: List[CoachSeats] = Field(default_factory=list)
    count: int = Field(0, description="Number of coaches")
