"""Leaderboard API: global and per-character rankings by CV."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from services.leaderboard_service import (
    LeaderboardEntry,
    get_leaderboard,
    parse_character_id,
    parse_limit,
    parse_region_filter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


def _serialize(entries: List[LeaderboardEntry]) -> list:
    return [e.model_dump(mode="json", by_alias=True) for e in entries]


@router.get(
    "/global",
    summary="Global leaderboard",
    description="Top builds across all characters, highest CV first.",
)
async def get_global_leaderboard(
    limit: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_db_session),
):
    """GET /api/leaderboard/global?limit=&region= -> LeaderboardEntry[]."""
    try:
        entries = await get_leaderboard(
            session, limit=parse_limit(limit), region=parse_region_filter(region)
        )
    except Exception:
        logger.exception("Global leaderboard query failed")
        return JSONResponse(status_code=500, content={"error": "internal"})
    return _serialize(entries)


@router.get(
    "/character/{character_id}",
    summary="Character leaderboard",
    description="Top builds for one character id, highest CV first.",
)
async def get_character_leaderboard(
    character_id: str,
    limit: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_db_session),
):
    """GET /api/leaderboard/character/{id}?limit=&region= -> LeaderboardEntry[] or 400."""
    parsed_id = parse_character_id(character_id)
    if parsed_id is None:
        return JSONResponse(status_code=400, content={"error": "invalid character id"})
    try:
        entries = await get_leaderboard(
            session,
            limit=parse_limit(limit),
            character_id=parsed_id,
            region=parse_region_filter(region),
        )
    except Exception:
        logger.exception("Character leaderboard query failed character_id=%s", parsed_id)
        return JSONResponse(status_code=500, content={"error": "internal"})
    return _serialize(entries)
