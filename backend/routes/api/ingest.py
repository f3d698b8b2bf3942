"""Ingestion API: accept one character build report from a showcase client."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session, get_uid_rate_limiter
from core.rate_limit import UidRateLimiter
from ingestion.ingest_service import ingest_build
from ingestion.validation import (
    RATE_LIMITED,
    IngestRejected,
    parse_uid,
    validate_ingest_body,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])


async def _read_body(request: Request) -> Any:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@router.post(
    "/ingest",
    summary="Ingest a character build",
    description="Validates the report, upserts player, character slot and build. Returns the build id.",
)
async def post_ingest(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    limiter: UidRateLimiter = Depends(get_uid_rate_limiter),
):
    """POST /api/ingest -> { ok: true, id } or { error }."""
    body = await _read_body(request)
    uid = parse_uid(body)
    if not limiter.allow(uid):
        raise IngestRejected(RATE_LIMITED, status_code=429)
    ingest_request = validate_ingest_body(body)

    try:
        build = await ingest_build(session, ingest_request)
    except Exception as e:
        logger.exception(
            "Ingest failed uid=%s character_id=%s", uid, ingest_request.character_id
        )
        await session.rollback()
        return JSONResponse(
            status_code=500, content={"error": "internal", "message": str(e)}
        )
    return {"ok": True, "id": str(build.id)}
