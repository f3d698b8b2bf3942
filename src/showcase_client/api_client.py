"""
Async HTTP client for the leaderboard API (ingest + leaderboard reads).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from .config import get_client_settings

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100


def normalize_base_url(raw: Optional[str]) -> str:
    """Trim whitespace and trailing slashes from a base URL."""
    return (raw or "").strip().rstrip("/")


def api_url(base_url: str, path: str) -> str:
    suffix = path if path.startswith("/") else f"/{path}"
    return f"{normalize_base_url(base_url)}{suffix}"


def leaderboard_path(
    character_id: Optional[int] = None,
    region: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
) -> str:
    """Character-scoped path when a character is selected, global otherwise."""
    if character_id is not None:
        path = f"/api/leaderboard/character/{character_id}?limit={limit}"
    else:
        path = f"/api/leaderboard/global?limit={limit}"
    if region:
        path += f"&region={quote(region, safe='')}"
    return path


class LeaderboardApiClient:
    """Thin wrapper over httpx.AsyncClient bound to the API base URL."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_client_settings()
        self.base_url = normalize_base_url(base_url or settings.api_base_url)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout
        )

    async def __aenter__(self) -> "LeaderboardApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_json(self, path: str) -> Any:
        response = await self._client.get(api_url(self.base_url, path))
        response.raise_for_status()
        return response.json()

    async def ingest_build(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST one build report; raises httpx.HTTPStatusError on non-2xx."""
        try:
            response = await self._client.post(api_url(self.base_url, "/api/ingest"), json=body)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.warning("Ingest failed: %s", e)
            raise

    async def fetch_global_leaderboard(
        self, limit: int = DEFAULT_LIMIT, region: Optional[str] = None
    ) -> Any:
        return await self.get_json(leaderboard_path(None, region, limit))

    async def fetch_character_leaderboard(
        self, character_id: int, limit: int = DEFAULT_LIMIT, region: Optional[str] = None
    ) -> Any:
        return await self.get_json(leaderboard_path(character_id, region, limit))
