from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.build import Build
from models.character import Character
from models.player import Player
from .base import BaseRepository

LeaderboardRow = Tuple[Build, Character, Player]


class BuildRepository(BaseRepository[Build]):
    """Repository for Build records (one per character slot)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_character_pk(self, character_pk: int) -> Optional[Build]:
        stmt = select(Build).where(Build.character_pk == character_pk)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        character_pk: int,
        crit_rate: float,
        crit_dmg: float,
        atk: Optional[float],
        spd: Optional[float],
        cv: float,
        build_hash: str,
    ) -> Build:
        """Insert or overwrite the build for a character slot.

        created_at is kept from the first insert; everything else is replaced.
        """
        now = datetime.now(timezone.utc)
        build = await self.get_by_character_pk(character_pk)
        if build is None:
            build = Build(
                character_pk=character_pk,
                crit_rate=crit_rate,
                crit_dmg=crit_dmg,
                atk=atk,
                spd=spd,
                cv=cv,
                build_hash=build_hash,
                created_at=now,
                updated_at=now,
            )
            await self.add(build)
        else:
            build.crit_rate = crit_rate
            build.crit_dmg = crit_dmg
            build.atk = atk
            build.spd = spd
            build.cv = cv
            build.build_hash = build_hash
            build.updated_at = now
        await self.session.flush()
        return build

    async def list_ranked(
        self,
        limit: int,
        character_id: Optional[int] = None,
        region: Optional[str] = None,
    ) -> List[LeaderboardRow]:
        """Builds joined with slot and player, highest CV first.

        Equal CVs are ordered by created_at then build id, oldest first.
        """
        stmt = (
            select(Build, Character, Player)
            .join(Character, Build.character_pk == Character.id)
            .join(Player, Character.uid == Player.uid)
        )
        if character_id is not None:
            stmt = stmt.where(Character.character_id == character_id)
        if region is not None:
            stmt = stmt.where(Player.region == region)
        stmt = stmt.order_by(
            Build.cv.desc(), Build.created_at.asc(), Build.id.asc()
        ).limit(limit)
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]
