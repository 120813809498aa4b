"""
Portfolio Backend — Education Service
=======================================

What:  Reads and edits education entries.
Who:   GET /api/education and /api/admin/education.

Ordering is end_date descending (most recent degree first); entries without
an end date sort last, then by id for a stable order.
"""

import logging
from typing import List

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.exceptions import DatabaseError, NotFoundError
from portfolio.models.education import Education
from portfolio.schemas.education import EducationRequest, EducationResponse

logger = logging.getLogger(__name__)


class EducationService:

    @staticmethod
    def to_response(entry: Education) -> EducationResponse:
        coordinates = None
        if entry.coordinates_lng is not None and entry.coordinates_lat is not None:
            coordinates = (entry.coordinates_lng, entry.coordinates_lat)
        return EducationResponse(
            id=entry.id,
            degree=entry.degree,
            field_of_study=entry.field_of_study,
            institution=entry.institution,
            location=entry.location,
            start_date=entry.start_date,
            end_date=entry.end_date,
            gpa=entry.gpa,
            coordinates=coordinates,
            accomplishments=list(entry.accomplishments or []),
        )

    async def list_education(self, db: AsyncSession) -> List[EducationResponse]:
        try:
            result = await db.execute(
                select(Education).order_by(
                    desc(Education.end_date).nulls_last(), asc(Education.id)
                )
            )
            entries = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing education: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch education data",
                context={"error_type": type(e).__name__},
            )
        return [self.to_response(e) for e in entries]

    async def create_education(self, db: AsyncSession, payload: EducationRequest) -> int:
        entry = Education()
        self._apply(entry, payload)
        try:
            db.add(entry)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating education entry: %s", str(e), exc_info=True)
            raise DatabaseError(message="Failed to create education entry")
        logger.info("Education entry %d created (%s, %s)", entry.id, entry.degree, entry.institution)
        return entry.id

    async def update_education(self, db: AsyncSession, entry_id: int, payload: EducationRequest) -> None:
        entry = await self._get_entry(db, entry_id)
        self._apply(entry, payload)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating education entry %d: %s", entry_id, str(e))
            raise DatabaseError(message="Failed to update education entry", context={"entry_id": entry_id})
        logger.info("Education entry %d updated", entry_id)

    async def delete_education(self, db: AsyncSession, entry_id: int) -> None:
        entry = await self._get_entry(db, entry_id)
        try:
            await db.delete(entry)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting education entry %d: %s", entry_id, str(e))
            raise DatabaseError(message="Failed to delete education entry", context={"entry_id": entry_id})
        logger.info("Education entry %d deleted", entry_id)

    @staticmethod
    def _apply(entry: Education, payload: EducationRequest) -> None:
        entry.degree = payload.degree
        entry.field_of_study = payload.field_of_study
        entry.institution = payload.institution
        entry.location = payload.location
        entry.start_date = payload.start_date
        entry.end_date = payload.end_date
        entry.gpa = payload.gpa
        if payload.coordinates is None:
            entry.coordinates_lng = None
            entry.coordinates_lat = None
        else:
            entry.coordinates_lng, entry.coordinates_lat = payload.coordinates
        # New list object so the JSON column registers the change
        entry.accomplishments = list(payload.accomplishments)

    async def _get_entry(self, db: AsyncSession, entry_id: int) -> Education:
        try:
            entry = await db.get(Education, entry_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching education entry %d: %s", entry_id, str(e))
            raise DatabaseError(message="Failed to fetch education entry", context={"entry_id": entry_id})
        if entry is None:
            raise NotFoundError(resource="education entry", resource_id=str(entry_id))
        return entry


education_service = EducationService()
