"""
Portfolio Backend — Seed Service Tests
========================================

What we test:
    ✅ Empty database receives every seed row
    ✅ Running twice inserts nothing the second time
    ✅ A table with content is left alone while empty ones are filled
"""

import pytest

from portfolio import seed_data
from portfolio.schemas.skill import SkillRequest
from portfolio.services.career_service import career_service
from portfolio.services.education_service import education_service
from portfolio.services.seed_service import SeedService
from portfolio.services.skill_service import skill_service
from portfolio.services.station_service import station_service


class TestSeedService:

    def setup_method(self):
        self.service = SeedService()

    @pytest.mark.asyncio
    async def test_seeds_empty_database(self, db_session):
        inserted = await self.service.seed(db_session)

        assert inserted == {
            "career_positions": 5,
            "skills": 15,
            "air_quality_stations": 10,
            "education": 1,
        }
        positions = await career_service.list_positions(db_session)
        assert len(positions) == len(seed_data.CAREER_POSITIONS)
        assert all(p.accomplishments for p in positions)
        assert positions[-1].end_date is None

        (education,) = await education_service.list_education(db_session)
        assert "Texas A&M" in education.institution

    @pytest.mark.asyncio
    async def test_second_run_inserts_nothing(self, db_session):
        await self.service.seed(db_session)

        inserted = await self.service.seed(db_session)

        assert set(inserted.values()) == {0}
        assert len(await skill_service.list_skills(db_session)) == 15
        assert len(await station_service.list_stations(db_session)) == 10

    @pytest.mark.asyncio
    async def test_non_empty_table_left_alone(self, db_session):
        await skill_service.create_skill(
            db_session, SkillRequest(name="Fortran", category="Legacy", proficiency=2)
        )

        inserted = await self.service.seed(db_session)

        assert inserted["skills"] == 0
        assert inserted["career_positions"] == 5
        assert [s.name for s in await skill_service.list_skills(db_session)] == ["Fortran"]
