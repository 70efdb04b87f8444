"""Utilities"""

from .config import get_settings
from .text_utils import build_route_code, fuzzy_match, parse_route_code

__all__ = ["get_settings", "build_route_code", "fuzzy_match", "parse_route_code"]
