"""Services"""

from .station_service import StationService
from .catalog_service import CatalogService
from .http_client import HttpClient
from .seat_service import classify, resolve_seat_config, seat_directions, swap
from .direction_service import apply_direction, resolve_direction
from .layout_service import render_layout

__all__ = [
    "StationService",
    "CatalogService",
    "HttpClient",
    "classify",
    "resolve_seat_config",
    "seat_directions",
    "swap",
    "apply_direction",
    "resolve_direction",
    "render_layout",
]
