"""Services: query composition over repositories."""

from .leaderboard_service import LeaderboardEntry, get_leaderboard

__all__ = [
    "LeaderboardEntry",
    "get_leaderboard",
]
