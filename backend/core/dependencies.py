from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_database_manager
from .rate_limit import UidRateLimiter


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding an AsyncSession from the DatabaseManager."""
    manager = get_database_manager()
    async with manager.session() as session:
        yield session


def get_uid_rate_limiter(request: Request) -> UidRateLimiter:
    """FastAPI dependency returning the limiter attached to this app instance."""
    return request.app.state.uid_rate_limiter
