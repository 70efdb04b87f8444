"""Seat classification

Splits the seats of a coach into front facing and back facing sets.

Rules, in order:
  1. expand front_range, clamped into [1, total_seats] (endpoints swapped
     when start > end);
  2. expand back_range the same way; without one, auto_back_fill takes the
     complement of the front seats;
  3. a seat claimed by both ranges stays front facing;
  4. seats left unassigned all go to the larger set, ties go to front;
  5. both sets are returned in ascending order.

A template without any range is seeded from its layout preset first.
"""

import logging
import math
from typing import Optional, Set, Tuple

from ..errors import ConfigurationMissingError
from ..models.railway import Coach, TrainCoach, TravelClass
from ..models.seat import ClassifiedSeats, SeatLayoutPreset, SeatRangeConfig

logger = logging.getLogger(__name__)


def expand_range(seat_range: Optional[Tuple[int, int]], total_seats: int) -> Set[int]:
    """Seat numbers of an inclusive range, clamped into [1, total_seats]"""
    if seat_range is None or total_seats <= 0:
        return set()
    start, end = seat_range
    if start > end:
        start, end = end, start
    lo = max(start, 1)
    hi = min(end, total_seats)
    if (lo, hi) != (start, end):
        logger.debug(f"Seat range {seat_range} clamped to ({lo}, {hi}) for {total_seats} seats")
    if lo > hi:
        return set()
    return set(range(lo, hi + 1))


def _preset_seats(config: SeatRangeConfig) -> Tuple[Set[int], Set[int]]:
    all_seats = set(range(1, config.total_seats + 1))
    if config.layout == SeatLayoutPreset.ALL_FRONT:
        return all_seats, set()
    if config.layout == SeatLayoutPreset.ALL_BACK:
        return set(), all_seats
    if config.layout == SeatLayoutPreset.MIXED:
        half = math.ceil(config.total_seats / 2)
        return set(range(1, half + 1)), set(range(half + 1, config.total_seats + 1))
    return set(), set()


def classify(config: SeatRangeConfig) -> ClassifiedSeats:
    """Partition seats 1..total_seats into front and back facing sets"""
    total = config.total_seats
    if total <= 0:
        return ClassifiedSeats(total_seats=0)

    all_seats = set(range(1, total + 1))

    if config.front_range is None and config.back_range is None:
        front, back = _preset_seats(config)
        if config.auto_back_fill:
            back = all_seats - front
    else:
        front = expand_range(config.front_range, total)
        if config.back_range is not None:
            back = expand_range(config.back_range, total)
        elif config.auto_back_fill:
            back = all_seats - front
        else:
            back = set()

    back -= front

    missing = all_seats - front - back
    if missing:
        if len(front) >= len(back):
            front |= missing
        else:
            back |= missing

    return ClassifiedSeats(total_seats=total, front=sorted(front), back=sorted(back))


def swap(seats: ClassifiedSeats) -> ClassifiedSeats:
    """Exchange front and back sets for the reverse run"""
    return ClassifiedSeats(total_seats=seats.total_seats, front=list(seats.back), back=list(seats.front))


def seat_directions(config: SeatRangeConfig, is_reverse: bool = False) -> ClassifiedSeats:
    seats = classify(config)
    return swap(seats) if is_reverse else seats


def resolve_seat_config(
    train_coach: Optional[TrainCoach] = None,
    coach: Optional[Coach] = None,
    travel_class: Optional[TravelClass] = None,
) -> SeatRangeConfig:
    """Pick the effective template: per-train override, then coach, then class default"""
    if coach is None and train_coach is not None:
        coach = train_coach.coach

    candidates = (
        ("train override", train_coach.seat_override if train_coach else None),
        ("coach template", coach.seat_config if coach else None),
        ("class default", travel_class.seat_config if travel_class else None),
    )
    for source, config in candidates:
        if config is not None and config.usable:
            logger.debug(f"Using {source} for coach {coach.code if coach else '?'}")
            return config

    code = coach.code if coach else "unknown"
    raise ConfigurationMissingError(f"No seat template with seats for coach {code}")
