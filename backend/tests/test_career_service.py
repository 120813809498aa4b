"""
Portfolio Backend — Career Service Tests
==========================================

What we test:
    ✅ Timeline is ordered by start date with bullets in sort order
    ✅ Create returns the new id and stores bullets in the given order
    ✅ Update overwrites fields and replaces the bullet list
    ✅ Delete removes the position and its bullets
    ✅ Unknown ids raise NotFoundError
    ✅ SQLAlchemy failures surface as DatabaseError
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from portfolio.exceptions import DatabaseError, NotFoundError
from portfolio.models import CareerAccomplishment
from portfolio.schemas.career import CareerPositionRequest
from portfolio.services.career_service import CareerService


def make_request(**overrides) -> CareerPositionRequest:
    data = {
        "title": "GIS Analyst",
        "company": "Acme Mapping",
        "location": "Denver, CO",
        "startDate": "2015-01",
        "endDate": "2018-06",
        "coordinates": [-104.99, 39.74],
        "accomplishments": ["Built the basemap", "Automated QA"],
    }
    data.update(overrides)
    return CareerPositionRequest.model_validate(data)


async def count_accomplishments(db) -> int:
    return (await db.execute(select(func.count()).select_from(CareerAccomplishment))).scalar()


class TestCareerServiceList:

    def setup_method(self):
        self.service = CareerService()

    @pytest.mark.asyncio
    async def test_empty_table_returns_empty_list(self, db_session):
        assert await self.service.list_positions(db_session) == []

    @pytest.mark.asyncio
    async def test_positions_ordered_by_start_date(self, db_session):
        await self.service.create_position(db_session, make_request(title="Later", startDate="2020-03"))
        await self.service.create_position(db_session, make_request(title="Earlier", startDate="2009-08"))

        positions = await self.service.list_positions(db_session)

        assert [p.title for p in positions] == ["Earlier", "Later"]

    @pytest.mark.asyncio
    async def test_response_shape(self, db_session):
        await self.service.create_position(
            db_session, make_request(endDate="", accomplishments=["First", "Second", "Third"])
        )

        (position,) = await self.service.list_positions(db_session)

        assert position.end_date is None
        assert position.coordinates == (-104.99, 39.74)
        assert position.accomplishments == ["First", "Second", "Third"]
        body = position.model_dump(by_alias=True)
        assert "startDate" in body and "endDate" in body

    @pytest.mark.asyncio
    async def test_position_without_accomplishments_gets_empty_list(self, db_session):
        await self.service.create_position(db_session, make_request(accomplishments=[]))

        (position,) = await self.service.list_positions(db_session)

        assert position.accomplishments == []

    @pytest.mark.asyncio
    async def test_database_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(DatabaseError):
            await self.service.list_positions(mock_db_session)


class TestCareerServiceWrite:

    def setup_method(self):
        self.service = CareerService()

    @pytest.mark.asyncio
    async def test_create_returns_id(self, db_session):
        first = await self.service.create_position(db_session, make_request())
        second = await self.service.create_position(db_session, make_request())

        assert first >= 1
        assert second == first + 1

    @pytest.mark.asyncio
    async def test_blank_accomplishments_are_dropped(self, db_session):
        await self.service.create_position(
            db_session, make_request(accomplishments=["Kept", "  ", ""])
        )

        (position,) = await self.service.list_positions(db_session)

        assert position.accomplishments == ["Kept"]

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_accomplishments(self, db_session):
        position_id = await self.service.create_position(db_session, make_request())

        await self.service.update_position(
            db_session,
            position_id,
            make_request(title="Senior GIS Analyst", endDate=None, accomplishments=["New only"]),
        )

        (position,) = await self.service.list_positions(db_session)
        assert position.title == "Senior GIS Analyst"
        assert position.end_date is None
        assert position.accomplishments == ["New only"]
        assert await count_accomplishments(db_session) == 1

    @pytest.mark.asyncio
    async def test_update_keeps_given_order(self, db_session):
        position_id = await self.service.create_position(db_session, make_request())

        await self.service.update_position(
            db_session, position_id, make_request(accomplishments=["c", "a", "b"])
        )

        (position,) = await self.service.list_positions(db_session)
        assert position.accomplishments == ["c", "a", "b"]

    @pytest.mark.asyncio
    async def test_delete_cascades_to_accomplishments(self, db_session):
        position_id = await self.service.create_position(db_session, make_request())
        assert await count_accomplishments(db_session) == 2

        await self.service.delete_position(db_session, position_id)

        assert await self.service.list_positions(db_session) == []
        assert await count_accomplishments(db_session) == 0

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.update_position(db_session, 999, make_request())

    @pytest.mark.asyncio
    async def test_delete_unknown_id_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_position(db_session, 999)
