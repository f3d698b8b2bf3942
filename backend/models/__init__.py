"""SQLAlchemy models for the showcase leaderboard.

Importing this package registers every table on ``Base.metadata``.
"""

from .base import Base
from .build import Build
from .character import Character
from .player import Player

__all__ = [
    "Base",
    "Build",
    "Character",
    "Player",
]
