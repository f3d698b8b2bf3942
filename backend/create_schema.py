"""Create the leaderboard tables on DATABASE_URL and exit."""

import asyncio
import sys

from core.config import get_settings
from core.database import dispose_database, get_database_manager, init_database


async def main() -> int:
    settings = get_settings()
    await init_database(settings.database_url)
    try:
        await get_database_manager().create_all()
    except Exception as e:
        print(f"Schema creation failed: {e}", file=sys.stderr)
        return 1
    finally:
        await dispose_database()
    print("schema ok")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
