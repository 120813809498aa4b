"""
Portfolio Backend — Education Route
=====================================
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db_session
from portfolio.schemas.common import ErrorResponse
from portfolio.schemas.education import EducationResponse
from portfolio.services.education_service import education_service

router = APIRouter(prefix="/api", tags=["Education"])


@router.get(
    "/education",
    response_model=List[EducationResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List education entries",
    description=(
        "Most recent first. `coordinates` is null unless both longitude and "
        "latitude are stored."
    ),
)
async def list_education(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[EducationResponse]:
    entries = await education_service.list_education(db)
    response.headers["X-Total-Count"] = str(len(entries))
    return entries
