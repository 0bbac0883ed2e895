"""
Birdwatch API — Health Check Route
====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   With the SQL backend, runs SELECT 1 against the engine. With an
       explicit store (memory backend, tests) there is no database to probe.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database reachable, or not used (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response
from sqlalchemy import text

from birdwatch import __version__
from birdwatch.config import settings
from birdwatch.schemas.bird import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    if getattr(request.app.state, "bird_store", None) is not None:
        db_status = "unused"
    else:
        try:
            from birdwatch.database import engine
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: database unreachable: %s", str(e))

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        store_backend=settings.store_backend,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
