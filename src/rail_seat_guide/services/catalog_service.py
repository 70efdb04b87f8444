"""Read-only catalog of stations, travel classes, coaches and trains"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import aiofiles
import httpx
from pydantic import ValidationError

from ..errors import CoachNotFoundError, ConfigurationMissingError, TrainNotFoundError
from ..models.query import (
    CoachSeats,
    DirectionInfo,
    SeatDirectionRequest,
    TrainSearchResult,
    TrainSeats,
    TrainSummary,
)
from ..models.railway import Coach, Train, TrainClassGroup, TrainCoach, TravelClass
from ..models.seat import SeatRangeConfig
from ..models.station import Station
from ..utils.config import get_settings
from ..utils.text_utils import fuzzy_match, parse_route_code
from .direction_service import apply_direction, find_station_index, resolve_direction
from .http_client import HttpClient
from .layout_service import render_seats
from .seat_service import classify, resolve_seat_config, seat_directions
from .station_service import StationService

logger = logging.getLogger(__name__)


class CatalogService:
    """Snapshot of the content API records the seat engine reads from"""

    def __init__(self, station_service: Optional[StationService] = None):
        self.settings = get_settings()
        self.station_service = station_service or StationService()
        self.stations: Dict[str, Station] = {}
        self.travel_classes: Dict[str, TravelClass] = {}
        self.coaches: Dict[str, Coach] = {}
        self.trains: List[Train] = []

    # ── Loading ────────────────────────────────────────────────────────────

    async def load_catalog(self, path: Optional[str] = None):
        """Load from the content API when configured, else from the local snapshot."""
        if path is None and self.settings.catalog_url:
            try:
                async with HttpClient() as client:
                    data = await client.get_json(self.settings.catalog_url)
                self.load_from_dict(data)
                return
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Content API unavailable ({e}), falling back to local snapshot")

        path = path or self.settings.catalog_path
        if not os.path.exists(path):
            logger.error(f"Catalog file not found: {path}")
            return
        async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
            content = await f.read()
        try:
            self.load_from_dict(json.loads(content))
        except ValueError as e:
            logger.error(f"Catalog file {path} is not a valid catalog: {e}")

    def load_from_dict(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError(f"catalog must be a JSON object, got {type(data).__name__}")
        stations: Dict[str, Station] = {}
        for record in data.get("stations", []):
            try:
                station = Station.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping station record {record!r}: {e}")
                continue
            stations[station.code.upper()] = station

        travel_classes: Dict[str, TravelClass] = {}
        for record in data.get("travel_classes", []):
            try:
                travel_class = TravelClass.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping travel class record {record!r}: {e}")
                continue
            travel_classes[travel_class.code.upper()] = travel_class

        coaches: Dict[str, Coach] = {}
        for record in data.get("coaches", []):
            try:
                coach = Coach.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping coach record {record!r}: {e}")
                continue
            coaches[coach.code.upper()] = coach

        self.stations = stations
        self.travel_classes = travel_classes
        self.coaches = coaches

        trains = []
        for record in data.get("trains", []):
            train = self._build_train(record)
            if train is not None:
                trains.append(train)
        self.trains = trains

        self.station_service.set_stations(list(stations.values()))
        logger.info(
            f"Catalog loaded: {len(self.stations)} stations, {len(self.travel_classes)} classes, "
            f"{len(self.coaches)} coaches, {len(self.trains)} trains"
        )

    def _build_train(self, record: Dict[str, Any]) -> Optional[Train]:
        name = record.get("name") or record.get("number")
        origin = self.stations.get(str(record.get("origin", "")).upper())
        destination = self.stations.get(str(record.get("destination", "")).upper())
        if origin is None or destination is None:
            logger.warning(f"Skipping train {name}: unknown origin or destination station")
            return None

        intermediate = []
        for code in record.get("route", []):
            station = self.stations.get(str(code).upper())
            if station is None:
                logger.warning(f"Train {name}: unknown route station {code}, ignored")
                continue
            intermediate.append(station)

        classes = []
        position = 0
        for class_record in record.get("classes", []):
            class_code = class_record.get("travel_class")
            travel_class = self.travel_classes.get(str(class_code).upper()) if class_code else None
            if class_code and travel_class is None:
                logger.warning(f"Train {name}: unknown travel class {class_code}")
            train_coaches = []
            for coach_record in class_record.get("coaches", []):
                position += 1
                coach = self.coaches.get(str(coach_record.get("coach", "")).upper())
                if coach is None:
                    logger.warning(f"Train {name}: unknown coach {coach_record.get('coach')!r}, ignored")
                    continue
                try:
                    override = coach_record.get("seat_override")
                    train_coaches.append(TrainCoach(
                        coach=coach,
                        position=position if coach_record.get("position") is None else coach_record["position"],
                        seat_override=SeatRangeConfig.model_validate(override) if override else None,
                    ))
                except ValidationError as e:
                    logger.warning(f"Train {name}: bad coach entry {coach_record!r}: {e}")
            classes.append(TrainClassGroup(travel_class=travel_class, coaches=train_coaches))

        try:
            return Train(
                name=name,
                number=str(record.get("number", "")),
                reverse_number=str(record["reverse_number"]) if record.get("reverse_number") else None,
                origin=origin,
                destination=destination,
                intermediate=intermediate,
                classes=classes,
                route_code_forward=record.get("code_from_to"),
                route_code_reverse=record.get("code_to_from"),
            )
        except ValidationError as e:
            logger.warning(f"Skipping train record {name!r}: {e}")
            return None

    # ── Lookups ────────────────────────────────────────────────────────────

    def get_train(self, identifier: str) -> Train:
        """Find a train by primary number, reverse number or route code"""
        key = (identifier or "").strip().upper()
        if key:
            for train in self.trains:
                if key == train.number.upper() or (train.reverse_number and key == train.reverse_number.upper()):
                    return train
            if parse_route_code(key):
                for train in self.trains:
                    if key in (train.code_from_to.upper(), train.code_to_from.upper()):
                        return train
        raise TrainNotFoundError(f"Train {identifier!r} not found")

    def get_coach(self, code: str) -> Coach:
        coach = self.coaches.get((code or "").strip().upper())
        if coach is None:
            raise CoachNotFoundError(f"Coach {code!r} not found")
        return coach

    def get_travel_class(self, code: Optional[str]) -> Optional[TravelClass]:
        if not code:
            return None
        return self.travel_classes.get(code.strip().upper())

    def find_train_coach(self, train: Train, code: str) -> TrainCoach:
        key = (code or "").strip().upper()
        for train_coach in train.coaches:
            if train_coach.coach.code.upper() == key:
                return train_coach
        raise CoachNotFoundError(f"Coach {code!r} not found in train {train.number}")

    def class_of(self, train: Optional[Train], train_coach: Optional[TrainCoach], coach: Coach) -> Optional[TravelClass]:
        travel_class = train.travel_class_for(train_coach) if train and train_coach else None
        return travel_class or self.get_travel_class(coach.travel_class)

    # ── Search ─────────────────────────────────────────────────────────────

    def summarize(self, train: Train, direction: Optional[DirectionInfo] = None) -> TrainSummary:
        return TrainSummary(
            name=train.name,
            number=train.number,
            reverse_number=train.reverse_number,
            from_station=train.origin.title,
            to_station=train.destination.title,
            code_from_to=train.code_from_to,
            code_to_from=train.code_to_from,
            direction=direction,
        )

    def search_trains(self, from_station: Optional[str] = None, to_station: Optional[str] = None,
                      query: Optional[str] = None, limit: int = 50) -> TrainSearchResult:
        """Trains serving both stations in either direction, or matching a name/number"""
        results: List[TrainSummary] = []
        if from_station and to_station:
            request = SeatDirectionRequest(from_station=from_station, to_station=to_station)
            for train in self.trains:
                stations = train.stations
                from_idx = find_station_index(stations, request.from_station)
                to_idx = find_station_index(stations, request.to_station)
                if from_idx is None or to_idx is None or from_idx == to_idx:
                    continue
                results.append(self.summarize(train, resolve_direction(train, request)))
        elif query is not None:
            term = query.strip()
            for train in self.trains:
                if term and (fuzzy_match(term, train.name) or
                             term in train.number or
                             (train.reverse_number and term in train.reverse_number)):
                    results.append(self.summarize(train))
        else:
            results = [self.summarize(train) for train in self.trains]

        results = results[:limit]
        return TrainSearchResult(trains=results, total=len(results))

    # ── Seat directions ────────────────────────────────────────────────────

    def _seats_per_block(self, travel_class: Optional[TravelClass]) -> int:
        if travel_class and travel_class.seats_per_block:
            return travel_class.seats_per_block
        return self.settings.seats_per_block

    def coach_seats(self, coach: Coach, info: DirectionInfo, train: Optional[Train] = None,
                    train_coach: Optional[TrainCoach] = None, include_layout: bool = False) -> CoachSeats:
        """Seat orientation of one coach, reversed when the direction says so"""
        travel_class = self.class_of(train, train_coach, coach)
        result = CoachSeats(
            coach_code=coach.code,
            travel_class=travel_class.code if travel_class else coach.travel_class,
            class_name=travel_class.name if travel_class else None,
            position=train_coach.position if train_coach else 0,
            direction=info.direction,
        )
        try:
            config = resolve_seat_config(train_coach, coach, travel_class)
        except ConfigurationMissingError as e:
            logger.warning(f"{e}; reporting coach without seat data")
            result.seat_data_available = False
            return result

        seats = apply_direction(classify(config), info)
        result.total_seats = seats.total_seats
        result.front_facing_seats = seats.front
        result.back_facing_seats = seats.back
        if include_layout:
            result.layout = render_seats(seats, self._seats_per_block(travel_class))
        return result

    def train_seats(self, request: SeatDirectionRequest) -> TrainSeats:
        """Direction and seat orientation of every coach of the requested train"""
        if not request.train:
            raise TrainNotFoundError("Train identifier is required")
        train = self.get_train(request.train)
        info = resolve_direction(train, request)

        if request.coach:
            train_coaches = [self.find_train_coach(train, request.coach)]
        else:
            train_coaches = train.coaches

        coaches = [
            self.coach_seats(tc.coach, info, train, tc, request.include_layout)
            for tc in train_coaches
        ]
        logger.info(
            f"Train {train.number}: {info.direction.value} ({info.reason.value}), {len(coaches)} coaches"
        )
        return TrainSeats(
            train=self.summarize(train),
            direction=info,
            route_code=train.code_to_from if info.is_reverse else train.code_from_to,
            coaches=coaches,
            count=len(coaches),
        )

    def template_seats(self, code: str, is_reverse: bool = False, include_layout: bool = False) -> CoachSeats:
        """Seat orientation of a coach from its own or its class template, outside any train"""
        coach = self.get_coach(code)
        travel_class = self.get_travel_class(coach.travel_class)
        config = resolve_seat_config(coach=coach, travel_class=travel_class)
        seats = seat_directions(config, is_reverse)
        result = CoachSeats(
            coach_code=coach.code,
            travel_class=coach.travel_class,
            class_name=travel_class.name if travel_class else None,
            total_seats=seats.total_seats,
            front_facing_seats=seats.front,
            back_facing_seats=seats.back,
            direction="reverse" if is_reverse else "forward",
        )
        if include_layout:
            result.layout = render_seats(seats, self._seats_per_block(travel_class))
        return result
