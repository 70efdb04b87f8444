"""Data models"""

from .station import Station, StationMatch, StationSearchResult
from .seat import (
    ClassifiedSeats,
    SeatBand,
    SeatGrid,
    SeatLayoutPreset,
    SeatRangeConfig,
    SeatRow,
)
from .railway import Coach, Train, TrainClassGroup, TrainCoach, TravelClass
from .query import (
    CoachSeats,
    Direction,
    DirectionInfo,
    DirectionReason,
    SeatDirectionRequest,
    TrainSearchResult,
    TrainSeats,
    TrainSummary,
)

__all__ = [
    "Station",
    "StationMatch",
    "StationSearchResult",
    "ClassifiedSeats",
    "SeatBand",
    "SeatGrid",
    "SeatLayoutPreset",
    "SeatRangeConfig",
    "SeatRow",
    "Coach",
    "Train",
    "TrainClassGroup",
    "TrainCoach",
    "TravelClass",
    "CoachSeats",
    "Direction",
    "DirectionInfo",
    "DirectionReason",
    "SeatDirectionRequest",
    "TrainSearchResult",
    "TrainSeats",
    "TrainSummary",
]
