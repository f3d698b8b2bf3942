from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.player import Player
from .base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    """Repository for Player entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_uid(self, uid: str) -> Optional[Player]:
        stmt = select(Player).where(Player.uid == uid)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, uid: str, region: Optional[str]) -> Player:
        """Insert or update the player for uid.

        A None region leaves a previously stored region untouched.
        """
        now = datetime.now(timezone.utc)
        player = await self.get_by_uid(uid)
        if player is None:
            player = Player(uid=uid, region=region, created_at=now, updated_at=now)
            await self.add(player)
        else:
            if region is not None:
                player.region = region
            player.updated_at = now
        await self.session.flush()
        return player
