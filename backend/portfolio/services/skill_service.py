"""
Portfolio Backend — Skill Service
===================================

What:  Reads and edits the skills matrix.
Who:   GET /api/skills and the /api/admin/skills routes.

Names are unique. A clash is checked up front so the admin gets a 400 with
the offending name; the IntegrityError branch covers the race where two
writers insert the same name at once.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.exceptions import DatabaseError, NotFoundError, ValidationError
from portfolio.models.skill import Skill
from portfolio.schemas.skill import SkillRequest, SkillResponse

logger = logging.getLogger(__name__)


class SkillService:

    async def list_skills(self, db: AsyncSession) -> List[SkillResponse]:
        """Skills grouped by category (A→Z), strongest first within a category."""
        try:
            result = await db.execute(
                select(Skill).order_by(
                    asc(Skill.category), desc(Skill.proficiency), asc(Skill.name)
                )
            )
            skills = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing skills: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch skills",
                context={"error_type": type(e).__name__},
            )
        return [SkillResponse.model_validate(skill) for skill in skills]

    async def create_skill(self, db: AsyncSession, payload: SkillRequest) -> int:
        await self._ensure_name_available(db, payload.name)
        skill = Skill(
            name=payload.name,
            category=payload.category,
            proficiency=payload.proficiency,
        )
        db.add(skill)
        await self._flush(db, payload.name, "Failed to create skill")
        logger.info("Skill %d created (%s)", skill.id, skill.name)
        return skill.id

    async def update_skill(self, db: AsyncSession, skill_id: int, payload: SkillRequest) -> None:
        skill = await self._get_skill(db, skill_id)
        await self._ensure_name_available(db, payload.name, exclude_id=skill_id)
        skill.name = payload.name
        skill.category = payload.category
        skill.proficiency = payload.proficiency
        await self._flush(db, payload.name, "Failed to update skill")
        logger.info("Skill %d updated", skill_id)

    async def delete_skill(self, db: AsyncSession, skill_id: int) -> None:
        skill = await self._get_skill(db, skill_id)
        await db.delete(skill)
        await self._flush(db, skill.name, "Failed to delete skill")
        logger.info("Skill %d deleted", skill_id)

    async def _ensure_name_available(
        self, db: AsyncSession, name: str, exclude_id: Optional[int] = None
    ) -> None:
        query = select(Skill.id).where(Skill.name == name)
        if exclude_id is not None:
            query = query.where(Skill.id != exclude_id)
        try:
            clash = (await db.execute(query)).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error checking skill name: %s", str(e))
            raise DatabaseError(message="Failed to save skill")
        if clash is not None:
            raise ValidationError(
                message=f"A skill named '{name}' already exists",
                field="name",
            )

    async def _flush(self, db: AsyncSession, name: str, failure_message: str) -> None:
        try:
            await db.flush()
        except IntegrityError:
            raise ValidationError(
                message=f"A skill named '{name}' already exists",
                field="name",
            )
        except SQLAlchemyError as e:
            logger.error("Database error saving skill '%s': %s", name, str(e))
            raise DatabaseError(message=failure_message, context={"error_type": type(e).__name__})

    async def _get_skill(self, db: AsyncSession, skill_id: int) -> Skill:
        try:
            skill = await db.get(Skill, skill_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching skill %d: %s", skill_id, str(e))
            raise DatabaseError(message="Failed to fetch skill", context={"skill_id": skill_id})
        if skill is None:
            raise NotFoundError(resource="skill", resource_id=str(skill_id))
        return skill


skill_service = SkillService()
