"""
Standup Notes Backend - Health Check Route
==========================================

What:  GET /health for container probes and monitoring.
How:   SELECT 1 against the store and a model listing against the
       completion provider.

Status levels:
    - healthy:   store and provider reachable
    - degraded:  store reachable, provider not (only standup generation is affected)
    - unhealthy: store unreachable
The endpoint itself always answers 200; the status field carries the verdict.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from standup_notes import __version__
from standup_notes.database import engine
from standup_notes.schemas.common import HealthResponse
from standup_notes.services.summary_service import summary_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    completion_status = "available"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if not await summary_service.completion.health_check():
        completion_status = "unavailable"
        if overall != "unhealthy":
            overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        completion=completion_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
