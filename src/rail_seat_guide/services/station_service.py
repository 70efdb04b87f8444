import logging
from typing import List, Optional

from ..models.station import Station, StationMatch, StationSearchResult
from ..utils.text_utils import normalize

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


def calculate_relevance(query: str, station: Station) -> int:
    """Rank a station against a normalized query

    The title scores exact 100, prefix 80, contains 50 or 20 per matching
    word; a code containing the query adds 50.
    """
    title = normalize(station.title)
    code = station.code.lower()
    relevance = 0
    if title == query:
        relevance += 100
    elif title.startswith(query):
        relevance += 80
    elif query in title:
        relevance += 50
    else:
        words = query.split()
        for word in words:
            for title_word in title.split():
                if word in title_word:
                    relevance += 20
    if query in code:
        relevance += 50
    return relevance


class StationService:
    def __init__(self, stations: Optional[List[Station]] = None):
        self.stations: List[Station] = list(stations or [])

    def set_stations(self, stations: List[Station]):
        self.stations = list(stations)
        logger.info(f"Station index holds {len(self.stations)} stations")

    def get_station_by_code(self, code: str) -> Optional[Station]:
        code = code.strip().upper()
        for s in self.stations:
            if s.code.upper() == code:
                return s
        return None

    def get_station_by_title(self, title: str) -> Optional[Station]:
        title = normalize(title)
        for s in self.stations:
            if normalize(s.title) == title:
                return s
        return None

    def search_stations(self, query: str, limit: int = 10) -> StationSearchResult:
        raw_query = query or ""
        query = normalize(raw_query)
        if len(query) < MIN_QUERY_LENGTH:
            return StationSearchResult(stations=[], total=0, query=raw_query)

        matches: List[StationMatch] = []
        matched_codes = set()
        # 1. exact title or code
        for s in self.stations:
            if query == normalize(s.title) or query == s.code.lower():
                matches.append(StationMatch(station=s, relevance=calculate_relevance(query, s)))
                matched_codes.add(s.code)
        # 2. substring on title, code or division
        for s in self.stations:
            if s.code in matched_codes:
                continue
            if (query in normalize(s.title) or
                query in s.code.lower() or
                (s.division and query in normalize(s.division))):
                matches.append(StationMatch(station=s, relevance=calculate_relevance(query, s)))

        matches.sort(key=lambda m: (-m.relevance, m.station.title))
        stations = [m.station for m in matches[:limit]]
        return StationSearchResult(stations=stations, total=len(stations), query=raw_query)

    def get_station_code(self, query: str) -> Optional[str]:
        if not query:
            return None
        q = query.strip()
        # 1. exact title
        station = self.get_station_by_title(q)
        if station:
            return station.code
        # 2. exact code
        station = self.get_station_by_code(q)
        if station:
            return station.code
        return None
