"""
Server entrypoint: verify the store, then serve the FastAPI app with uvicorn.

  python backend_entry.py                 -> check DB, create tables, serve on HOST:PORT
  python backend_entry.py --port 9000     -> override PORT
  python backend_entry.py --check-only    -> check DB and exit

An unreachable store is fatal: the process logs the error and exits with
status 1 instead of serving traffic.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_backend_dir = Path(__file__).resolve().parent
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))

from core.config import get_settings
from core.database import dispose_database, get_database_manager, init_database
from core.logging import setup_logging

logger = logging.getLogger("backend_entry")


async def check_store(database_url: str) -> bool:
    """True when the store answers and the schema is in place."""
    try:
        await init_database(database_url)
        manager = get_database_manager()
        await manager.ping()
        await manager.create_all()
    except Exception:
        logger.exception("Database connection failed")
        return False
    finally:
        await dispose_database()
    logger.info("Database connected")
    return True


def main(argv=None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Showcase leaderboard API server")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--check-only", action="store_true", help="Check the database and exit")
    args = parser.parse_args(argv)

    setup_logging(settings)
    if not asyncio.run(check_store(settings.database_url)):
        return 1
    if args.check_only:
        return 0

    import uvicorn
    from main import app

    logger.info("Listening on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
