"""Client side of the showcase leaderboard: upload builds, read rankings."""

from .api_client import LeaderboardApiClient, leaderboard_path, normalize_base_url
from .collector import ShowcaseCharacter, build_ingest_body, ingest_from_showcase
from .leaderboard_view import LeaderboardRow, load_entries, normalize_entry

__all__ = [
    "LeaderboardApiClient",
    "LeaderboardRow",
    "ShowcaseCharacter",
    "build_ingest_body",
    "ingest_from_showcase",
    "leaderboard_path",
    "load_entries",
    "normalize_base_url",
    "normalize_entry",
]
