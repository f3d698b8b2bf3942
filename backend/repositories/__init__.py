"""Repository layer for DB access only (lookups + upsert by unique key).

Repositories accept an AsyncSession explicitly and never commit.
"""

from .base import BaseRepository
from .build_repo import BuildRepository
from .character_repo import CharacterRepository
from .player_repo import PlayerRepository

__all__ = [
    "BaseRepository",
    "BuildRepository",
    "CharacterRepository",
    "PlayerRepository",
]
