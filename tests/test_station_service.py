"""
Tests for station search.
"""

from rail_seat_guide.models import Station
from rail_seat_guide.services.station_service import StationService, calculate_relevance

STATIONS = [
    Station(code="DHA", title="Dhaka", division="Dhaka"),
    Station(code="BBD", title="Biman Bandar", division="Dhaka"),
    Station(code="JOY", title="Joydebpur", division="Dhaka"),
    Station(code="CTG", title="Chittagong", division="Chittagong"),
    Station(code="TKG", title="Thakurgaon Road", division="Rangpur"),
]


class TestSearchStations:

    def setup_method(self):
        self.service = StationService(STATIONS)

    def test_exact_title_first(self):
        result = self.service.search_stations("Dhaka")
        assert result.stations[0].code == "DHA"
        # division matches follow
        assert {s.code for s in result.stations} == {"DHA", "BBD", "JOY"}
        assert result.total == 3
        assert result.query == "Dhaka"

    def test_code_lookup(self):
        result = self.service.search_stations("ctg")
        assert [s.code for s in result.stations] == ["CTG"]

    def test_partial_title(self):
        result = self.service.search_stations("thakur")
        assert [s.title for s in result.stations] == ["Thakurgaon Road"]

    def test_short_query_returns_nothing(self):
        result = self.service.search_stations("d")
        assert result.stations == []
        assert result.total == 0

    def test_limit(self):
        assert len(self.service.search_stations("dhaka", limit=1).stations) == 1

    def test_no_match(self):
        assert self.service.search_stations("Sylhet").total == 0


class TestStationCode:

    def setup_method(self):
        self.service = StationService(STATIONS)

    def test_by_title(self):
        assert self.service.get_station_code(" joydebpur ") == "JOY"

    def test_by_code(self):
        assert self.service.get_station_code("bbd") == "BBD"

    def test_unknown(self):
        assert self.service.get_station_code("Sylhet") is None
        assert self.service.get_station_code("") is None


class TestRelevance:

    def test_ordering(self):
        dhaka, biman = STATIONS[0], STATIONS[1]
        assert calculate_relevance("dhaka", dhaka) > calculate_relevance("dhak", dhaka)
        assert calculate_relevance("biman", biman) > calculate_relevance("bandar", biman)

    def test_code_boost(self):
        # title prefix plus code
        assert calculate_relevance("dha", STATIONS[0]) == 80 + 50

    def test_exact_code_counted_once(self):
        chittagong = STATIONS[3]
        assert calculate_relevance("ctg", chittagong) == 50

    def test_exact_title(self):
        assert calculate_relevance("chittagong", STATIONS[3]) == 100
