"""
Tests for direction resolution.

Rule priority: explicit flag, reverse number / route code, requested
route, even/odd convention, forward fallback.
"""

import logging

from rail_seat_guide.models import (
    ClassifiedSeats,
    DirectionReason,
    SeatDirectionRequest,
)
from rail_seat_guide.services.direction_service import (
    apply_direction,
    find_station_index,
    resolve_direction,
    station_matches,
)
from rail_seat_guide.services.seat_service import classify

from conftest import DHAKA, PANCHAGARH


class TestExplicitFlag:

    def test_explicit_reverse_beats_forward_route(self, ekota):
        """The flag wins over a route that reads forward."""
        request = SeatDirectionRequest(train="705", direction="reverse",
                                       from_station="Dhaka", to_station="Panchagarh")
        info = resolve_direction(ekota, request)
        assert info.is_reverse is True
        assert info.reason == DirectionReason.EXPLICIT_REVERSE

    def test_explicit_forward_beats_reverse_number(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest(train="706", direction="FORWARD"))
        assert info.is_reverse is False
        assert info.reason == DirectionReason.EXPLICIT_FORWARD


class TestTrainNumber:

    def test_reverse_number(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest(train="706"))
        assert info.is_reverse is True
        assert info.reason == DirectionReason.REVERSE_NUMBER
        assert info.from_station == "Panchagarh"
        assert info.to_station == "Dhaka"

    def test_reverse_number_beats_forward_route(self, ekota):
        request = SeatDirectionRequest(train="706", from_station="Dhaka", to_station="Natore")
        assert resolve_direction(ekota, request).reason == DirectionReason.REVERSE_NUMBER

    def test_primary_number_follows_parity(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest(train="705"))
        assert info.is_reverse is False
        assert info.reason == DirectionReason.DEFAULT_ODD_NUMBER

    def test_even_primary_number_is_reverse(self, unnumbered_train):
        """An even primary number with no reverse number runs in reverse."""
        train = unnumbered_train.model_copy(update={"number": "706"})
        info = resolve_direction(train, SeatDirectionRequest(train="706"))
        assert info.is_reverse is True
        assert info.reason == DirectionReason.DEFAULT_EVEN_NUMBER

    def test_route_beats_parity(self, ekota):
        """A backward route on the primary number still reverses."""
        request = SeatDirectionRequest(train="705", from_station="Natore", to_station="Joydebpur")
        info = resolve_direction(ekota, request)
        assert info.is_reverse is True
        assert info.reason == DirectionReason.ROUTE_REVERSE
        assert info.from_station == "Natore"
        assert info.to_station == "Joydebpur"


class TestRouteCode:

    def test_reverse_route_code(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest(train="pcg_to_dha"))
        assert info.is_reverse is True
        assert info.reason == DirectionReason.ROUTE_CODE_REVERSE

    def test_forward_route_code(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest(train="DHA_TO_PCG"))
        assert info.is_reverse is False
        assert info.reason == DirectionReason.ROUTE_CODE_FORWARD

    def test_stored_route_code_is_preferred(self, ekota):
        train = ekota.model_copy(update={"route_code_reverse": "PANCHAGARH_TO_DHAKA"})
        info = resolve_direction(train, SeatDirectionRequest(train="PANCHAGARH_TO_DHAKA"))
        assert info.reason == DirectionReason.ROUTE_CODE_REVERSE


class TestRouteMatch:

    def test_forward_route(self, unnumbered_train):
        request = SeatDirectionRequest(from_station="dhaka", to_station="panchagarh")
        info = resolve_direction(unnumbered_train, request)
        assert info.is_reverse is False
        assert info.reason == DirectionReason.ROUTE_FORWARD

    def test_reverse_route_partial_names(self, unnumbered_train):
        """Partial names match as substrings."""
        request = SeatDirectionRequest(from_station="Panch", to_station="dhak")
        info = resolve_direction(unnumbered_train, request)
        assert info.is_reverse is True
        assert info.reason == DirectionReason.ROUTE_REVERSE

    def test_station_codes_match(self, ekota):
        request = SeatDirectionRequest(from_station="NTR", to_station="JOY")
        assert resolve_direction(ekota, request).reason == DirectionReason.ROUTE_REVERSE

    def test_longer_request_term_matches(self, ekota):
        """A request term containing the station title also matches."""
        request = SeatDirectionRequest(from_station="Panchagarh Station", to_station="Dhaka Kamalapur")
        assert resolve_direction(ekota, request).is_reverse is True

    def test_unknown_station_falls_through(self, ekota):
        request = SeatDirectionRequest(train="705", from_station="Sylhet", to_station="Dhaka")
        assert resolve_direction(ekota, request).reason == DirectionReason.DEFAULT_ODD_NUMBER

    def test_same_station_falls_through(self, ekota):
        request = SeatDirectionRequest(train="705", from_station="Dhaka", to_station="DHA")
        assert resolve_direction(ekota, request).reason == DirectionReason.DEFAULT_ODD_NUMBER


class TestFallbacks:

    def test_even_number_is_reverse(self, unnumbered_train):
        info = resolve_direction(unnumbered_train, SeatDirectionRequest(train="706"))
        assert info.is_reverse is True
        assert info.reason == DirectionReason.DEFAULT_EVEN_NUMBER

    def test_odd_number_is_forward(self, unnumbered_train):
        info = resolve_direction(unnumbered_train, SeatDirectionRequest(train="705"))
        assert info.is_reverse is False
        assert info.reason == DirectionReason.DEFAULT_ODD_NUMBER

    def test_ambiguous_defaults_forward(self, ekota, caplog):
        with caplog.at_level(logging.WARNING):
            info = resolve_direction(ekota, SeatDirectionRequest(train="EKOTA"))
        assert info.is_reverse is False
        assert info.reason == DirectionReason.DEFAULT_FORWARD
        assert info.confident is False
        assert "Low confidence" in caplog.text

    def test_empty_request_defaults_forward(self, ekota):
        info = resolve_direction(ekota, SeatDirectionRequest())
        assert info.reason == DirectionReason.DEFAULT_FORWARD
        assert info.from_station == "Dhaka"


class TestStationMatching:

    def test_blank_term_never_matches(self):
        assert station_matches("", DHAKA) is False
        assert station_matches("   ", DHAKA) is False
        assert station_matches(None, DHAKA) is False

    def test_first_match_in_route_order(self, ekota):
        assert find_station_index(ekota.stations, "a") == 0

    def test_no_match(self):
        assert find_station_index([DHAKA, PANCHAGARH], "Sylhet") is None


class TestApplyDirection:

    def test_end_to_end_reverse_number(self, ekota):
        """706 on EKOTA EXPRESS flips the UMA coach."""
        uma = ekota.coaches[0].coach
        info = resolve_direction(ekota, SeatDirectionRequest(train="706"))
        seats = apply_direction(classify(uma.seat_config), info)
        assert info.is_reverse is True
        assert seats.front == list(range(31, 61))
        assert seats.back == list(range(1, 31))

    def test_forward_keeps_sets(self, ekota):
        seats = ClassifiedSeats(total_seats=3, front=[1], back=[2, 3])
        info = resolve_direction(ekota, SeatDirectionRequest(direction="forward"))
        assert apply_direction(seats, info) == seats
