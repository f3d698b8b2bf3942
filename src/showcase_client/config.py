import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass
class ClientSettings:
    """Client settings loaded from environment variables with safe defaults."""

    api_base_url: str = "http://localhost:8080"
    asset_base_url: str = ""
    game_data_path: str = ""
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "ClientSettings":
        try:
            timeout = float(os.getenv("SHOWCASE_REQUEST_TIMEOUT", cls.request_timeout))
        except ValueError:
            timeout = cls.request_timeout
        return cls(
            api_base_url=os.getenv("SHOWCASE_API_BASE_URL") or cls.api_base_url,
            asset_base_url=os.getenv("SHOWCASE_ASSET_BASE_URL", cls.asset_base_url),
            game_data_path=os.getenv("SHOWCASE_GAME_DATA_PATH", cls.game_data_path),
            request_timeout=timeout,
        )


@lru_cache
def get_client_settings() -> ClientSettings:
    """Return a cached ClientSettings instance."""
    return ClientSettings.from_env()
