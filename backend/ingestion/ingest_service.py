"""
Ingestion orchestration: resolve region, upsert player, character slot and
build in one unit of work.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ingestion.region import resolve_region
from ingestion.validation import IngestRequest
from models.build import Build
from repositories.build_repo import BuildRepository
from repositories.character_repo import CharacterRepository
from repositories.player_repo import PlayerRepository
from scoring.build_hash import build_fingerprint_fields, make_build_hash
from scoring.cv import compute_cv

logger = logging.getLogger(__name__)


async def ingest_build(session: AsyncSession, request: IngestRequest) -> Build:
    """Persist a validated build report and return the stored Build.

    The three upserts share the session and are committed together, so a
    failure part-way leaves nothing written.
    """
    region = resolve_region(request.region, request.uid)
    await PlayerRepository(session).upsert(request.uid, region)

    character = await CharacterRepository(session).upsert(
        uid=request.uid,
        character_id=request.character_id,
        level=request.level,
        eidolon=request.eidolon,
        light_cone_id=request.light_cone_id,
    )

    stats = request.stats
    cv = compute_cv(stats.cr, stats.cd)
    build_hash = make_build_hash(
        build_fingerprint_fields(
            request.uid, request.character_id, request.eidolon, request.light_cone_id
        )
    )
    build = await BuildRepository(session).upsert(
        character_pk=character.id,
        crit_rate=stats.cr,
        crit_dmg=stats.cd,
        atk=stats.atk,
        spd=stats.spd,
        cv=cv,
        build_hash=build_hash,
    )
    await session.commit()
    logger.info(
        "Ingested build uid=%s character_id=%s cv=%s region=%s",
        request.uid,
        request.character_id,
        cv,
        region,
    )
    return build
