"""
To-Do List Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancers.
How:   Runs SELECT 1 against the task store and reports the result.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (the API would answer 500 on every task call)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from todolist import __version__
from todolist.database import engine
from todolist.schemas.task import HealthResponse

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
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
