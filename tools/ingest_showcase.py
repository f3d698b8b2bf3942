"""
Showcase CLI: upload a showcase export and print leaderboards.

Usage: python tools/ingest_showcase.py upload export.json [--region NA] [--base-url URL]
       python tools/ingest_showcase.py leaderboard [--character 1205] [--region NA] [--limit 20]

Export format:
  {"uid": "800000001", "region": "ASIA",
   "characters": [{"id": 1205, "eidolon": 0, "lightCone": 23019,
                   "equipped": {"Head": "relic-1", ...},
                   "stats": {"CRIT Rate": 0.65, "CRIT DMG": 1.3, "ATK": 3500, "SPD": 134.2}}]}

Stats in the export are the preview calculator's output (fractions for CR/CD).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping

_src = Path(__file__).resolve().parent.parent / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from showcase_client.api_client import LeaderboardApiClient
from showcase_client.collector import ShowcaseCharacter, ingest_from_showcase
from showcase_client.game_data import GameData
from showcase_client.leaderboard_view import load_entries, table_rows

logger = logging.getLogger("ingest_showcase")


def _load_export(path: Path) -> Dict[str, Any]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict) or not raw.get("uid"):
        raise ValueError("export must be an object with a uid")
    return raw


def _characters(raw: Mapping[str, Any]) -> List[ShowcaseCharacter]:
    return [
        ShowcaseCharacter(
            id=c.get("id"),
            equipped=c.get("equipped") or {},
            eidolon=c.get("eidolon"),
            light_cone=c.get("lightCone"),
        )
        for c in raw.get("characters") or []
    ]


def _cmd_upload(args: argparse.Namespace) -> int:
    try:
        export = _load_export(Path(args.export))
    except (OSError, ValueError) as e:
        print(f"Cannot read export: {e}", file=sys.stderr)
        return 1

    stats_by_id = {str(c.get("id")): c.get("stats") or {} for c in export.get("characters") or []}
    characters = _characters(export)

    async def _run() -> int:
        async with LeaderboardApiClient(base_url=args.base_url) as api:
            return await ingest_from_showcase(
                api,
                str(export["uid"]),
                characters,
                preview=lambda c: stats_by_id.get(str(c.id), {}),
                region=args.region or export.get("region"),
            )

    uploaded = asyncio.run(_run())
    print(f"{uploaded}/{len(characters)} builds uploaded")
    return 0 if uploaded or not characters else 1


def _cmd_leaderboard(args: argparse.Namespace) -> int:
    async def _run():
        async with LeaderboardApiClient(base_url=args.base_url) as api:
            return await load_entries(
                api, character_id=args.character, region=args.region, limit=args.limit
            )

    entries = asyncio.run(_run())
    for rank, row in enumerate(table_rows(entries, GameData()), start=1):
        print(f"{rank:>3}  {row['cv']:>7}  {row['character']:<12} {row['uid']:<12} {row['region']}")
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    parser = argparse.ArgumentParser(prog="ingest_showcase", description="Upload showcase builds, read leaderboards")
    parser.add_argument("--base-url", default=None, help="API base URL (default: SHOWCASE_API_BASE_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    upload = sub.add_parser("upload", help="Upload every equipped character in a showcase export.")
    upload.add_argument("export", help="Path to showcase export JSON")
    upload.add_argument("--region", default=None, help="Region override (default: export region or inferred)")
    upload.set_defaults(func=_cmd_upload)

    board = sub.add_parser("leaderboard", help="Print a leaderboard.")
    board.add_argument("--character", type=int, default=None, help="Character id (default: global)")
    board.add_argument("--region", default=None, help="Region filter")
    board.add_argument("--limit", type=int, default=20, help="Rows to show")
    board.set_defaults(func=_cmd_leaderboard)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
