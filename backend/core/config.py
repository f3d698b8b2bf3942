import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


def _env_int(name: str, default: int) -> int:
    """Positive integer from env; falls back to default when unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(1, int(raw.strip()))
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "Showcase Leaderboard"
    env: str = "dev"
    database_url: str = "sqlite+aiosqlite:///./leaderboard.db"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    uid_rate_limit_per_minute: int = 60
    origin_rate_limit_per_minute: int = 120

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            host=os.getenv("HOST", cls.host),
            port=_env_int("PORT", cls.port),
            cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS", ["*"]),
            uid_rate_limit_per_minute=_env_int(
                "UID_RATE_LIMIT_PER_MINUTE", cls.uid_rate_limit_per_minute
            ),
            origin_rate_limit_per_minute=_env_int(
                "ORIGIN_RATE_LIMIT_PER_MINUTE", cls.origin_rate_limit_per_minute
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
