"""HTTP client for the content API"""

import logging
from typing import Any, Dict, Optional

import httpx

from rail_seat_guide.utils.config import get_settings

logger = logging.getLogger(__name__)


class HttpClient:
    """Read-only JSON client for catalog records"""

    def __init__(self):
        self.settings = get_settings()
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            headers={'User-Agent': self.settings.user_agent, 'Accept': 'application/json'},
            timeout=self.settings.request_timeout,
            follow_redirects=True
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a JSON document, raising on transport or status errors"""
        if self.session is None:
            raise RuntimeError("HttpClient must be used as an async context manager")
        try:
            response = await self.session.get(url, params=params)
            logger.info(f"GET {url} -> {response.status_code}")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Content API request failed: {e}")
            raise
        return response.json()
