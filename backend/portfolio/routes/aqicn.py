"""
Portfolio Backend — AQICN Proxy Routes
========================================

What:  Live air-quality data for the map demo.
Why:   Keeps the AQICN token on the server.

    GET /api/aqicn/stations        stations in the configured bounds
    GET /api/aqicn/station/{uid}   the upstream feed record, unchanged
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Path

from portfolio.schemas.common import ErrorResponse
from portfolio.schemas.station import StationResponse
from portfolio.services.aqicn_service import aqicn_service

router = APIRouter(prefix="/api/aqicn", tags=["Air Quality"])

UPSTREAM_RESPONSES = {
    500: {"description": "AQICN token not configured", "model": ErrorResponse},
    503: {"description": "AQICN unavailable or circuit open", "model": ErrorResponse},
}


@router.get(
    "/stations",
    response_model=List[StationResponse],
    responses=UPSTREAM_RESPONSES,
    summary="Live stations from AQICN",
    description=(
        "Stations inside AQICN_BOUNDS that currently report a reading, in the "
        "same shape as /api/stations."
    ),
)
async def live_stations() -> List[StationResponse]:
    return await aqicn_service.fetch_stations()


@router.get(
    "/station/{uid}",
    responses=UPSTREAM_RESPONSES,
    summary="Live detail for one AQICN station",
)
async def live_station_detail(
    uid: int = Path(..., description="AQICN station uid"),
) -> Dict[str, Any]:
    return await aqicn_service.fetch_station_detail(uid)
