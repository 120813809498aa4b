"""
Portfolio Backend — Public Endpoint Tests
===========================================

What:  The read-only API the SPA renders from, exercised over HTTP against
       a seeded in-memory database.
"""

import pytest
import pytest_asyncio

from portfolio.services.seed_service import seed_service


@pytest_asyncio.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        await seed_service.seed(session)
        await session.commit()


class TestCareerEndpoint:

    @pytest.mark.asyncio
    async def test_empty_database(self, test_client):
        response = await test_client.get("/api/career")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.asyncio
    async def test_camel_case_timeline(self, test_client, seeded):
        response = await test_client.get("/api/career")

        assert response.status_code == 200
        positions = response.json()
        assert response.headers["X-Total-Count"] == "5"
        start_dates = [p["startDate"] for p in positions]
        assert start_dates == sorted(start_dates)
        first = positions[0]
        assert set(first) == {
            "id", "title", "company", "location", "startDate", "endDate",
            "coordinates", "accomplishments",
        }
        assert len(first["coordinates"]) == 2
        assert -180 <= first["coordinates"][0] <= 180
        assert positions[-1]["endDate"] is None


class TestSkillsEndpoint:

    @pytest.mark.asyncio
    async def test_ordering(self, test_client, seeded):
        response = await test_client.get("/api/skills")

        skills = response.json()
        assert len(skills) == 15
        keys = [(s["category"], -s["proficiency"]) for s in skills]
        assert keys == sorted(keys)
        assert set(skills[0]) == {"id", "name", "category", "proficiency"}


class TestStationsEndpoint:

    @pytest.mark.asyncio
    async def test_ordered_by_name(self, test_client, seeded):
        response = await test_client.get("/api/stations")

        stations = response.json()
        assert len(stations) == 10
        names = [s["name"] for s in stations]
        assert names == sorted(names)
        assert stations[0]["lastUpdated"]
        assert stations[0]["status"] == "active"


class TestEducationEndpoint:

    @pytest.mark.asyncio
    async def test_seeded_entry(self, test_client, seeded):
        response = await test_client.get("/api/education")

        (entry,) = response.json()
        assert entry["fieldOfStudy"] == "Environmental Geoscience"
        assert entry["institution"] == "Texas A&M University"
        assert isinstance(entry["accomplishments"], list)
