"""
Portfolio Backend — Seed Service
==================================

What:  Fills empty tables with the content in portfolio/seed_data.py.
Who:   POST /api/admin/init-db (after create_schema()).

Idempotency:
    Each table is checked on its own and seeded only when it has no rows.
    Re-running init-db never duplicates content and never overwrites edits
    made through the admin API. A table that was emptied by hand is
    refilled on the next run.
"""

import logging
from typing import Dict, Type

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio import seed_data
from portfolio.database import Base
from portfolio.exceptions import DatabaseError
from portfolio.models import (
    AirQualityStation,
    CareerAccomplishment,
    CareerPosition,
    Education,
    Skill,
)

logger = logging.getLogger(__name__)


class SeedService:

    async def seed(self, db: AsyncSession) -> Dict[str, int]:
        """
        Seed every empty table.

        Returns:
            Rows inserted per table, e.g. {"career_positions": 5, "skills": 0, ...}
        """
        try:
            inserted = {
                CareerPosition.__tablename__: await self._seed_career(db),
                Skill.__tablename__: await self._seed_skills(db),
                AirQualityStation.__tablename__: await self._seed_stations(db),
                Education.__tablename__: await self._seed_education(db),
            }
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Seeding failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to initialize database",
                context={"error_type": type(e).__name__},
            )

        if any(inserted.values()):
            logger.info("Database seeded: %s", inserted)
        else:
            logger.info("Database already seeded, skipping")
        return inserted

    @staticmethod
    async def _is_empty(db: AsyncSession, model: Type[Base]) -> bool:
        count = (await db.execute(select(func.count()).select_from(model))).scalar() or 0
        return count == 0

    async def _seed_career(self, db: AsyncSession) -> int:
        if not await self._is_empty(db, CareerPosition):
            return 0
        for item in seed_data.CAREER_POSITIONS:
            lng, lat = item["coordinates"]
            db.add(
                CareerPosition(
                    title=item["title"],
                    company=item["company"],
                    location=item["location"],
                    start_date=item["start_date"],
                    end_date=item["end_date"],
                    coordinates_lng=lng,
                    coordinates_lat=lat,
                    accomplishments=[
                        CareerAccomplishment(accomplishment=text, sort_order=i)
                        for i, text in enumerate(item["accomplishments"])
                    ],
                )
            )
        return len(seed_data.CAREER_POSITIONS)

    async def _seed_skills(self, db: AsyncSession) -> int:
        if not await self._is_empty(db, Skill):
            return 0
        db.add_all(Skill(**item) for item in seed_data.SKILLS)
        return len(seed_data.SKILLS)

    async def _seed_stations(self, db: AsyncSession) -> int:
        if not await self._is_empty(db, AirQualityStation):
            return 0
        for item in seed_data.STATIONS:
            lng, lat = item["coordinates"]
            db.add(
                AirQualityStation(
                    name=item["name"],
                    location=item["location"],
                    coordinates_lng=lng,
                    coordinates_lat=lat,
                    aqi=item["aqi"],
                    category=item["category"],
                    pollutant=item["pollutant"],
                    last_updated=item["last_updated"],
                    status="active",
                )
            )
        return len(seed_data.STATIONS)

    async def _seed_education(self, db: AsyncSession) -> int:
        if not await self._is_empty(db, Education):
            return 0
        for item in seed_data.EDUCATION:
            lng, lat = item["coordinates"]
            db.add(
                Education(
                    degree=item["degree"],
                    field_of_study=item["field_of_study"],
                    institution=item["institution"],
                    location=item["location"],
                    start_date=item["start_date"],
                    end_date=item["end_date"],
                    gpa=item["gpa"],
                    coordinates_lng=lng,
                    coordinates_lat=lat,
                    accomplishments=list(item["accomplishments"]),
                )
            )
        return len(seed_data.EDUCATION)


seed_service = SeedService()
