"""Text helpers for station and route matching"""

import re
from typing import Optional, Tuple

ROUTE_CODE_SEPARATOR = "_TO_"
_ROUTE_CODE_PATTERN = re.compile(r'^\s*([A-Za-z0-9-]+)_TO_([A-Za-z0-9-]+)\s*$', re.IGNORECASE)


def normalize(text: Optional[str]) -> str:
    """Lowercase and collapse whitespace"""
    if not text:
        return ""
    return " ".join(text.split()).lower()


def fuzzy_match(term: Optional[str], candidate: Optional[str]) -> bool:
    """Case-insensitive substring match in either direction. Blank never matches."""
    t = normalize(term)
    c = normalize(candidate)
    if not t or not c:
        return False
    return t in c or c in t


def build_route_code(from_code: str, to_code: str) -> str:
    """'dha', 'pcg' -> 'DHA_TO_PCG'"""
    return f"{from_code.strip().upper()}{ROUTE_CODE_SEPARATOR}{to_code.strip().upper()}"


def parse_route_code(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """'DHA_TO_PCG' -> ('DHA', 'PCG'); None when not a route code"""
    if not value:
        return None
    m = _ROUTE_CODE_PATTERN.match(value)
    if not m:
        return None
    return m.group(1).upper(), m.group(2).upper()


def is_train_number(value: Optional[str]) -> bool:
    return bool(value) and value.strip().isdigit()
