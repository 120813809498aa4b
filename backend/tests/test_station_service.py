"""
Portfolio Backend — Station Service Tests
===========================================

What we test:
    ✅ Stations listed by name in the shared station shape
    ✅ Category derived from AQI when omitted, slugs normalized
    ✅ Status defaults to active
"""

import pytest

from portfolio.exceptions import NotFoundError
from portfolio.schemas.station import StationRequest
from portfolio.services.station_service import StationService


def station(**overrides) -> StationRequest:
    data = {
        "name": "Denver - CAMP",
        "location": "Denver, CO",
        "coordinates": [-104.9876, 39.7392],
        "aqi": 42,
        "pollutant": "PM2.5",
        "lastUpdated": "2024-01-15T10:30:00Z",
    }
    data.update(overrides)
    return StationRequest.model_validate(data)


class TestStationService:

    def setup_method(self):
        self.service = StationService()

    @pytest.mark.asyncio
    async def test_listed_by_name(self, db_session):
        await self.service.create_station(db_session, station(name="Pueblo"))
        await self.service.create_station(db_session, station(name="Aspen"))
        await self.service.create_station(db_session, station(name="Denver"))

        stations = await self.service.list_stations(db_session)

        assert [s.name for s in stations] == ["Aspen", "Denver", "Pueblo"]

    @pytest.mark.asyncio
    async def test_missing_category_derived_from_aqi(self, db_session):
        await self.service.create_station(db_session, station(aqi=151))

        (stored,) = await self.service.list_stations(db_session)

        assert stored.category == "Unhealthy"
        assert stored.status == "active"

    @pytest.mark.asyncio
    async def test_explicit_category_kept(self, db_session):
        await self.service.create_station(db_session, station(aqi=42, category="Moderate"))

        (stored,) = await self.service.list_stations(db_session)

        assert stored.category == "Moderate"

    @pytest.mark.asyncio
    async def test_slug_category_normalized(self, db_session):
        await self.service.create_station(db_session, station(aqi=120, category="unhealthy-sensitive"))

        (stored,) = await self.service.list_stations(db_session)

        assert stored.category == "Unhealthy for Sensitive Groups"

    @pytest.mark.asyncio
    async def test_response_uses_lng_lat_order(self, db_session):
        await self.service.create_station(db_session, station())

        (stored,) = await self.service.list_stations(db_session)

        body = stored.model_dump(by_alias=True)
        assert body["coordinates"] == (-104.9876, 39.7392)
        assert body["lastUpdated"] == "2024-01-15T10:30:00Z"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        station_id = await self.service.create_station(db_session, station())

        await self.service.update_station(db_session, station_id, station(aqi=250, status="inactive"))
        (stored,) = await self.service.list_stations(db_session)
        assert stored.category == "Very Unhealthy"
        assert stored.status == "inactive"

        await self.service.delete_station(db_session, station_id)
        assert await self.service.list_stations(db_session) == []

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_station(db_session, 7)

    def test_invalid_status_rejected_by_schema(self):
        with pytest.raises(ValueError):
            station(status="retired")

    def test_out_of_range_coordinates_rejected_by_schema(self):
        with pytest.raises(ValueError):
            station(coordinates=[39.7, -204.9])
