"""
Display lookups: character and light cone names from a game data export, and
image URLs from the asset host.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .api_client import normalize_base_url

logger = logging.getLogger(__name__)


@dataclass
class GameData:
    characters: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    light_cones: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    asset_base_url: str = ""

    def character_name(self, character_id: Any) -> str:
        data = self.characters.get(str(character_id)) or {}
        return data.get("name") or f"#{character_id}"

    def light_cone_name(self, light_cone_id: Any) -> Optional[str]:
        """None for no light cone (id missing or 0)."""
        if not light_cone_id:
            return None
        data = self.light_cones.get(str(light_cone_id)) or {}
        return data.get("name") or f"#{light_cone_id}"

    def character_avatar_url(self, character_id: Any) -> str:
        return f"{normalize_base_url(self.asset_base_url)}/icon/avatar/{character_id}.webp"

    def light_cone_icon_url(self, light_cone_id: Any) -> str:
        return f"{normalize_base_url(self.asset_base_url)}/icon/light_cone/{light_cone_id}.webp"

    def character_options(self) -> List[Tuple[int, str]]:
        """Released characters with numeric ids as (id, name), sorted by name."""
        options = [
            (int(cid), data.get("name") or f"#{cid}")
            for cid, data in self.characters.items()
            if cid.isdigit() and data.get("unreleased") is False
        ]
        return sorted(options, key=lambda option: option[1].lower())


def load_game_data(path: Optional[str], asset_base_url: str = "") -> GameData:
    """Read {"characters": {...}, "lightCones": {...}}; empty lookups when absent."""
    if not path:
        return GameData(asset_base_url=asset_base_url)
    file_path = Path(path)
    if not file_path.is_file():
        logger.warning("Game data file not found: %s", file_path)
        return GameData(asset_base_url=asset_base_url)
    raw = json.loads(file_path.read_text(encoding="utf-8"))
    return GameData(
        characters=raw.get("characters") or {},
        light_cones=raw.get("lightCones") or {},
        asset_base_url=asset_base_url,
    )
