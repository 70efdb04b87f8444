"""Railway catalog models"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .seat import SeatRangeConfig
from .station import Station
from ..utils.text_utils import build_route_code


class TravelClass(BaseModel):
    """Fare tier with a default seat template"""
    code: str = Field(..., description="Class short code, e.g. S_CHAIR")
    name: str = Field("", description="Display name")
    seat_config: Optional[SeatRangeConfig] = Field(None, description="Default seat template")
    seats_per_block: Optional[int] = Field(None, description="Seats per side of the aisle")


class Coach(BaseModel):
    """Physical coach"""
    code: str = Field(..., description="Coach code, e.g. UMA")
    title: Optional[str] = Field(None, description="Display title")
    travel_class: Optional[str] = Field(None, description="Travel class code")
    seat_config: Optional[SeatRangeConfig] = Field(None, description="Own seat template")


class TrainCoach(BaseModel):
    """Coach placed in a train"""
    coach: Coach
    position: int = Field(0, description="Order within the train")
    seat_override: Optional[SeatRangeConfig] = Field(None, description="Per-train seat template")


class TrainClassGroup(BaseModel):
    """Coaches of one travel class within a train"""
    travel_class: Optional[TravelClass] = None
    coaches: List[TrainCoach] = Field(default_factory=list)


class Train(BaseModel):
    """Train service in its canonical (forward) direction"""
    name: str = Field(..., description="Train name")
    number: str = Field(..., description="Primary train number")
    reverse_number: Optional[str] = Field(None, description="Number used on the return run")
    origin: Station
    destination: Station
    intermediate: List[Station] = Field(default_factory=list, description="Stops between the terminals")
    classes: List[TrainClassGroup] = Field(default_factory=list)
    route_code_forward: Optional[str] = Field(None, description="Stored FROM_TO_TO code")
    route_code_reverse: Optional[str] = Field(None, description="Stored reverse route code")

    @property
    def stations(self) -> List[Station]:
        return [self.origin, *self.intermediate, self.destination]

    @property
    def code_from_to(self) -> str:
        return self.route_code_forward or build_route_code(self.origin.code, self.destination.code)

    @property
    def code_to_from(self) -> str:
        return self.route_code_reverse or build_route_code(self.destination.code, self.origin.code)

    @property
    def coaches(self) -> List[TrainCoach]:
        placed = [tc for group in self.classes for tc in group.coaches]
        return sorted(placed, key=lambda tc: tc.position)

    def travel_class_for(self, train_coach: TrainCoach) -> Optional[TravelClass]:
        for group in self.classes:
            if any(tc is train_coach for tc in group.coaches):
                return group.travel_class
        return None
