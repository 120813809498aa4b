"""
Portfolio Backend — Admin Routes
==================================

What:  The admin login check, database bootstrap and write operations for
       every content table.
Who:   The SPA's admin panel, which stores the secret after /verify and
       sends it as `Authorization: Bearer <secret>` on every write.

Gate:
    /verify is open; it is how the panel checks a typed secret.
    Every other route carries the require_admin dependency:
        secret not configured → 500, no bearer header → 401, mismatch → 403

Writes on an id that does not exist answer 404.
"""

import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import create_schema, get_db_session
from portfolio.dependencies import require_admin
from portfolio.schemas.admin import InitDbResponse, VerifyRequest
from portfolio.schemas.career import CareerPositionRequest
from portfolio.schemas.common import ErrorResponse, SuccessResponse
from portfolio.schemas.education import EducationRequest
from portfolio.schemas.skill import SkillRequest
from portfolio.schemas.station import StationRequest
from portfolio.services.auth_service import admin_gate
from portfolio.services.career_service import career_service
from portfolio.services.education_service import education_service
from portfolio.services.seed_service import seed_service
from portfolio.services.skill_service import skill_service
from portfolio.services.station_service import station_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])

ADMIN_ONLY = [Depends(require_admin)]

GATE_RESPONSES = {
    401: {"description": "Missing bearer token", "model": ErrorResponse},
    403: {"description": "Wrong admin secret", "model": ErrorResponse},
    500: {"description": "Admin secret not configured or server error", "model": ErrorResponse},
}
ROW_RESPONSES = {
    **GATE_RESPONSES,
    404: {"description": "No row with that id", "model": ErrorResponse},
}


def _row_id(name: str):
    return Path(..., ge=1, description=f"Primary key of the {name}")


# ── Login / bootstrap ─────────────────────────────────────────────────────

@router.post(
    "/verify",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Secret key missing", "model": ErrorResponse},
        403: {"description": "Wrong admin secret", "model": ErrorResponse},
        500: {"description": "Admin secret not configured", "model": ErrorResponse},
    },
    summary="Check an admin secret",
)
async def verify(body: VerifyRequest) -> SuccessResponse:
    admin_gate.verify_secret(body.secret_key)
    logger.info("Admin secret verified")
    return SuccessResponse()


@router.post(
    "/init-db",
    response_model=InitDbResponse,
    dependencies=ADMIN_ONLY,
    responses=GATE_RESPONSES,
    summary="Create tables and seed empty ones",
    description="Safe to call repeatedly: tables that already hold rows are left alone.",
)
async def init_db(db: AsyncSession = Depends(get_db_session)) -> InitDbResponse:
    await create_schema(db.bind)
    seeded = await seed_service.seed(db)
    return InitDbResponse(seeded=seeded)


# ── Career ────────────────────────────────────────────────────────────────

@router.post(
    "/career",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=ADMIN_ONLY,
    responses=GATE_RESPONSES,
    summary="Add a career position",
)
async def create_career(
    body: CareerPositionRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    position_id = await career_service.create_position(db, body)
    return SuccessResponse(id=position_id)


@router.put(
    "/career/{position_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Replace a career position and its accomplishments",
)
async def update_career(
    body: CareerPositionRequest,
    position_id: int = _row_id("position"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await career_service.update_position(db, position_id, body)
    return SuccessResponse(id=position_id)


@router.delete(
    "/career/{position_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Delete a career position",
)
async def delete_career(
    position_id: int = _row_id("position"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await career_service.delete_position(db, position_id)
    return SuccessResponse(id=position_id)


# ── Skills ────────────────────────────────────────────────────────────────

@router.post(
    "/skills",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=ADMIN_ONLY,
    responses={**GATE_RESPONSES, 400: {"description": "Duplicate name", "model": ErrorResponse}},
    summary="Add a skill",
)
async def create_skill(
    body: SkillRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    skill_id = await skill_service.create_skill(db, body)
    return SuccessResponse(id=skill_id)


@router.put(
    "/skills/{skill_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses={**ROW_RESPONSES, 400: {"description": "Duplicate name", "model": ErrorResponse}},
    summary="Update a skill",
)
async def update_skill(
    body: SkillRequest,
    skill_id: int = _row_id("skill"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await skill_service.update_skill(db, skill_id, body)
    return SuccessResponse(id=skill_id)


@router.delete(
    "/skills/{skill_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Delete a skill",
)
async def delete_skill(
    skill_id: int = _row_id("skill"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await skill_service.delete_skill(db, skill_id)
    return SuccessResponse(id=skill_id)


# ── Stations ──────────────────────────────────────────────────────────────

@router.post(
    "/stations",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=ADMIN_ONLY,
    responses=GATE_RESPONSES,
    summary="Add an air-quality station",
    description="When `category` is omitted it is derived from `aqi`.",
)
async def create_station(
    body: StationRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    station_id = await station_service.create_station(db, body)
    return SuccessResponse(id=station_id)


@router.put(
    "/stations/{station_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Update an air-quality station",
)
async def update_station(
    body: StationRequest,
    station_id: int = _row_id("station"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await station_service.update_station(db, station_id, body)
    return SuccessResponse(id=station_id)


@router.delete(
    "/stations/{station_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Delete an air-quality station",
)
async def delete_station(
    station_id: int = _row_id("station"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await station_service.delete_station(db, station_id)
    return SuccessResponse(id=station_id)


# ── Education ─────────────────────────────────────────────────────────────

@router.post(
    "/education",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=ADMIN_ONLY,
    responses=GATE_RESPONSES,
    summary="Add an education entry",
)
async def create_education(
    body: EducationRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    entry_id = await education_service.create_education(db, body)
    return SuccessResponse(id=entry_id)


@router.put(
    "/education/{entry_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Update an education entry",
)
async def update_education(
    body: EducationRequest,
    entry_id: int = _row_id("education entry"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await education_service.update_education(db, entry_id, body)
    return SuccessResponse(id=entry_id)


@router.delete(
    "/education/{entry_id}",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=ADMIN_ONLY,
    responses=ROW_RESPONSES,
    summary="Delete an education entry",
)
async def delete_education(
    entry_id: int = _row_id("education entry"),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await education_service.delete_education(db, entry_id)
    return SuccessResponse(id=entry_id)
