"""Direction resolution"""

import logging
from typing import List, Optional

from ..models.query import Direction, DirectionInfo, DirectionReason, SeatDirectionRequest
from ..models.railway import Train
from ..models.seat import ClassifiedSeats
from ..models.station import Station
from ..utils.text_utils import fuzzy_match, is_train_number, parse_route_code
from .seat_service import swap

logger = logging.getLogger(__name__)


def station_matches(term: Optional[str], station: Station) -> bool:
    return fuzzy_match(term, station.title) or fuzzy_match(term, station.code)


def find_station_index(stations: List[Station], term: Optional[str]) -> Optional[int]:
    """Index of the first station in route order matching term"""
    for idx, station in enumerate(stations):
        if station_matches(term, station):
            return idx
    return None


def _info(train: Train, is_reverse: bool, reason: DirectionReason,
          from_station: Optional[Station] = None, to_station: Optional[Station] = None,
          confident: bool = True) -> DirectionInfo:
    if from_station is None or to_station is None:
        if is_reverse:
            from_station, to_station = train.destination, train.origin
        else:
            from_station, to_station = train.origin, train.destination
    return DirectionInfo(
        is_reverse=is_reverse,
        reason=reason,
        from_station=from_station.title,
        to_station=to_station.title,
        confident=confident,
    )


def _same_number(a: Optional[str], b: Optional[str]) -> bool:
    return bool(a) and bool(b) and a.strip().upper() == b.strip().upper()


def resolve_direction(train: Train, request: SeatDirectionRequest) -> DirectionInfo:
    """Decide whether the reverse seat assignment applies to this request"""
    # 1. explicit flag
    if request.direction == Direction.REVERSE:
        return _info(train, True, DirectionReason.EXPLICIT_REVERSE)
    if request.direction == Direction.FORWARD:
        return _info(train, False, DirectionReason.EXPLICIT_FORWARD)

    identifier = request.train

    # 2. reverse number or route code
    if _same_number(identifier, train.reverse_number):
        return _info(train, True, DirectionReason.REVERSE_NUMBER)

    if parse_route_code(identifier):
        code = identifier.strip().upper()
        if code == train.code_to_from.upper():
            return _info(train, True, DirectionReason.ROUTE_CODE_REVERSE)
        if code == train.code_from_to.upper():
            return _info(train, False, DirectionReason.ROUTE_CODE_FORWARD)

    # 3. requested route against the station list
    if request.from_station and request.to_station:
        stations = train.stations
        from_idx = find_station_index(stations, request.from_station)
        to_idx = find_station_index(stations, request.to_station)
        if from_idx is not None and to_idx is not None and from_idx != to_idx:
            is_reverse = to_idx < from_idx
            reason = DirectionReason.ROUTE_REVERSE if is_reverse else DirectionReason.ROUTE_FORWARD
            return _info(train, is_reverse, reason, stations[from_idx], stations[to_idx])
        logger.debug(
            f"Route {request.from_station!r} -> {request.to_station!r} not matched on train {train.number}"
        )

    # 4. even numbers run in reverse by convention
    if is_train_number(identifier):
        if int(identifier) % 2 == 0:
            return _info(train, True, DirectionReason.DEFAULT_EVEN_NUMBER)
        return _info(train, False, DirectionReason.DEFAULT_ODD_NUMBER)

    logger.warning(
        f"Low confidence direction for train {train.number} "
        f"(identifier={identifier!r}, from={request.from_station!r}, to={request.to_station!r}), assuming forward"
    )
    return _info(train, False, DirectionReason.DEFAULT_FORWARD, confident=False)


def apply_direction(seats: ClassifiedSeats, info: DirectionInfo) -> ClassifiedSeats:
    """Swap the canonical sets wholesale when travelling in reverse"""
    return swap(seats) if info.is_reverse else seats
