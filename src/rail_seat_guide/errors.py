"""Domain errors"""

from typing import Optional


class SeatGuideError(Exception):
    """Base error carrying a machine readable code."""

    code = "seat_guide_error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class ConfigurationMissingError(SeatGuideError):
    """No usable seat template at any precedence level."""

    code = "configuration_missing"


class TrainNotFoundError(SeatGuideError):
    code = "train_not_found"


class CoachNotFoundError(SeatGuideError):
    code = "coach_not_found"


class StationNotFoundError(SeatGuideError):
    code = "station_not_found"
