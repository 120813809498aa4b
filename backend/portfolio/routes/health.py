"""
Portfolio Backend — Health Check Route
========================================

What:  GET /api/health for container health checks and uptime monitors.
How:   Runs SELECT 1 through a request session and asks the AQICN provider
       for its state (no upstream call).

    Status levels:
    - healthy:   database up, AQICN configured and its circuit closed (200)
    - degraded:  database up, live map unavailable (200)
    - unhealthy: database unreachable (503)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio import __version__
from portfolio.database import get_db_session
from portfolio.schemas.common import HealthResponse
from portfolio.services.aqicn_service import aqicn_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(db: AsyncSession = Depends(get_db_session)):
    db_status = "connected"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    aqicn_status = await aqicn_service.health_check()
    if aqicn_status != "configured" and overall == "healthy":
        overall = "degraded"

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        aqicn=aqicn_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall == "unhealthy":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
