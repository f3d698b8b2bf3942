"""HTTP API: health, meta, ingestion and leaderboard endpoints under /api."""

from fastapi import APIRouter

from .health import router as health_router
from .ingest import router as ingest_router
from .leaderboard import router as leaderboard_router
from .meta import router as meta_router

router = APIRouter(prefix="/api", tags=["api"])
router.include_router(health_router)
router.include_router(meta_router)
router.include_router(ingest_router)
router.include_router(leaderboard_router)

api_router = router
