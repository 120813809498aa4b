"""
Portfolio Backend — Career Route
==================================

What:  GET /api/career, the resume timeline and career map data.
Who:   The SPA's timeline, globe and resume PDF components.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db_session
from portfolio.schemas.career import CareerPositionResponse
from portfolio.schemas.common import ErrorResponse
from portfolio.services.career_service import career_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Career"])


@router.get(
    "/career",
    response_model=List[CareerPositionResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List career positions",
    description=(
        "Returns every position, oldest first, with its accomplishments in "
        "display order. Coordinates are [lng, lat]."
    ),
)
async def list_career(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[CareerPositionResponse]:
    positions = await career_service.list_positions(db)
    response.headers["X-Total-Count"] = str(len(positions))
    return positions
