"""Station models"""

from typing import List, Optional
from pydantic import BaseModel, Field


class Station(BaseModel):
    """Station record"""
    code: str = Field(..., description="Station short code")
    title: str = Field(..., description="Display title")
    division: Optional[str] = Field(None, description="Railway division")


class StationMatch(BaseModel):
    """Station search hit"""
    station: Station
    relevance: int = Field(0, description="Ranking score")


class StationSearchResult(BaseModel):
    """Station search result"""
    stations: List[Station] = Field(default_factory=list, description="Matched stations")
    total: int = Field(0, description="Number of matches")
    query: str = Field("", description="Search term")
