import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import Settings, get_settings
from core.database import dispose_database, get_database_manager, init_database
from core.logging import setup_logging
from core.rate_limit import OriginRateLimitMiddleware, UidRateLimiter
from ingestion.validation import IngestRejected
from routes.api import api_router

logger = logging.getLogger(__name__)


async def _ingest_rejected_handler(request: Request, exc: IngestRejected) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    uid_rate_limiter: Optional[UidRateLimiter] = None,
) -> FastAPI:
    """Build the FastAPI app with its own rate-limit state."""
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.uid_rate_limiter = uid_rate_limiter or UidRateLimiter(
        capacity=settings.uid_rate_limit_per_minute
    )

    # Last added runs first: CORS headers are applied to 429s from the limiter too.
    app.add_middleware(
        OriginRateLimitMiddleware,
        limit=settings.origin_rate_limit_per_minute,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    app.add_exception_handler(IngestRejected, _ingest_rejected_handler)
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        """Connect to the store and make sure the schema exists."""
        await init_database(settings.database_url)
        manager = get_database_manager()
        await manager.ping()
        await manager.create_all()
        logger.info("Application startup complete (CORS allow_origins=%s)", settings.cors_allow_origins)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await dispose_database()
        logger.info("Application shutdown complete")

    return app


settings = get_settings()
setup_logging(settings)
app = create_app(settings)
