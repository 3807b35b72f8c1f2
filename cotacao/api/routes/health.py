"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from cotacao import __version__
from cotacao.application.dto.responses import HealthResponse
from cotacao.config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and uptime."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Runs a trivial query through the connection pool.
    """
    from cotacao.infrastructure.storage.sqlite import get_connection

    status_str = "healthy"
    try:
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
    except Exception as e:
        logger.warning("db_health_failed", error=str(e))
        status_str = "unhealthy"

    return HealthResponse(
        status=status_str,
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )
