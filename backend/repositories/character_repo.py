from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.character import Character
from .base import BaseRepository


class CharacterRepository(BaseRepository[Character]):
    """Repository for Character slots, unique per (uid, character_id)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_key(self, uid: str, character_id: int) -> Optional[Character]:
        stmt = select(Character).where(
            Character.uid == uid, Character.character_id == character_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        uid: str,
        character_id: int,
        level: int,
        eidolon: int,
        light_cone_id: int,
    ) -> Character:
        """Insert or overwrite the slot for (uid, character_id); latest report wins."""
        now = datetime.now(timezone.utc)
        character = await self.get_by_key(uid, character_id)
        if character is None:
            character = Character(
                uid=uid,
                character_id=character_id,
                level=level,
                eidolon=eidolon,
                light_cone_id=light_cone_id,
                updated_at=now,
            )
            await self.add(character)
        else:
            character.level = level
            character.eidolon = eidolon
            character.light_cone_id = light_cone_id
            character.updated_at = now
        await self.session.flush()
        return character
