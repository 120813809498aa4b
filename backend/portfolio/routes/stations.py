"""
Portfolio Backend — Stations Route
====================================

What:  GET /api/stations, the stored air-quality stations behind the map
       demo when live AQICN data is not used.
How:   Same StationResponse shape as /api/aqicn/stations, so the map
       component renders either source unchanged.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db_session
from portfolio.schemas.common import ErrorResponse
from portfolio.schemas.station import StationResponse
from portfolio.services.station_service import station_service

router = APIRouter(prefix="/api", tags=["Stations"])


@router.get(
    "/stations",
    response_model=List[StationResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List stored air-quality stations",
)
async def list_stations(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[StationResponse]:
    stations = await station_service.list_stations(db)
    response.headers["X-Total-Count"] = str(len(stations))
    return stations
