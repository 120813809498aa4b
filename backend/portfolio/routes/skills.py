"""
Portfolio Backend — Skills Route
==================================

What:  GET /api/skills, grouped by category on the client.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db_session
from portfolio.schemas.common import ErrorResponse
from portfolio.schemas.skill import SkillResponse
from portfolio.services.skill_service import skill_service

router = APIRouter(prefix="/api", tags=["Skills"])


@router.get(
    "/skills",
    response_model=List[SkillResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List skills",
    description="Ordered by category, then strongest proficiency first.",
)
async def list_skills(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[SkillResponse]:
    skills = await skill_service.list_skills(db)
    response.headers["X-Total-Count"] = str(len(skills))
    return skills
