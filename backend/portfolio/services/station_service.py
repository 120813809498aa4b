"""
Portfolio Backend — Air Quality Station Service
=================================================

What:  Reads and edits the stored demo stations.
Who:   GET /api/stations (data explorer, dashboard) and /api/admin/stations.

When an admin saves a station without a category, the category is derived
from the AQI value with the EPA bands in services/aqi.py.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.exceptions import DatabaseError, NotFoundError
from portfolio.models.station import AirQualityStation
from portfolio.schemas.station import StationRequest, StationResponse
from portfolio.services.aqi import aqi_category, normalize_category

logger = logging.getLogger(__name__)


class StationService:

    @staticmethod
    def to_response(station: AirQualityStation) -> StationResponse:
        return StationResponse(
            id=station.id,
            name=station.name,
            location=station.location,
            coordinates=(station.coordinates_lng, station.coordinates_lat),
            aqi=station.aqi,
            category=station.category,
            pollutant=station.pollutant,
            last_updated=station.last_updated,
            status=station.status,
        )

    async def list_stations(self, db: AsyncSession) -> List[StationResponse]:
        try:
            result = await db.execute(
                select(AirQualityStation).order_by(
                    asc(AirQualityStation.name), asc(AirQualityStation.id)
                )
            )
            stations = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing stations: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch stations",
                context={"error_type": type(e).__name__},
            )
        return [self.to_response(s) for s in stations]

    async def create_station(self, db: AsyncSession, payload: StationRequest) -> int:
        station = AirQualityStation()
        self._apply(station, payload)
        try:
            db.add(station)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating station: %s", str(e), exc_info=True)
            raise DatabaseError(message="Failed to create station")
        logger.info("Station %d created (%s, AQI %d)", station.id, station.name, station.aqi)
        return station.id

    async def update_station(self, db: AsyncSession, station_id: int, payload: StationRequest) -> None:
        station = await self._get_station(db, station_id)
        self._apply(station, payload)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating station %d: %s", station_id, str(e))
            raise DatabaseError(message="Failed to update station", context={"station_id": station_id})
        logger.info("Station %d updated", station_id)

    async def delete_station(self, db: AsyncSession, station_id: int) -> None:
        station = await self._get_station(db, station_id)
        try:
            await db.delete(station)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting station %d: %s", station_id, str(e))
            raise DatabaseError(message="Failed to delete station", context={"station_id": station_id})
        logger.info("Station %d deleted", station_id)

    @staticmethod
    def _apply(station: AirQualityStation, payload: StationRequest) -> None:
        lng, lat = payload.coordinates
        station.name = payload.name
        station.location = payload.location
        station.coordinates_lng = lng
        station.coordinates_lat = lat
        station.aqi = payload.aqi
        station.category = (
            normalize_category(payload.category) if payload.category else aqi_category(payload.aqi)
        )
        station.pollutant = payload.pollutant
        station.last_updated = payload.last_updated
        station.status = payload.status

    async def _get_station(self, db: AsyncSession, station_id: int) -> AirQualityStation:
        try:
            station = await db.get(AirQualityStation, station_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching station %d: %s", station_id, str(e))
            raise DatabaseError(message="Failed to fetch station", context={"station_id": station_id})
        if station is None:
            raise NotFoundError(resource="station", resource_id=str(station_id))
        return station


station_service = StationService()
