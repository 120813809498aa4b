"""
Portfolio Backend — Shared Pydantic Schemas
=============================================

What:  Base model and the response shapes shared by every route.
Why:   The SPA speaks camelCase JSON (startDate, fieldOfStudy, lastUpdated)
       while Python code and the database speak snake_case. CamelModel
       bridges the two: attributes are snake_case, the wire format is
       camelCase, and requests are accepted in either form.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every API schema: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# [lng, lat], GeoJSON order
Coordinates = Tuple[float, float]


def check_coordinates(value: Optional[Coordinates]) -> Optional[Coordinates]:
    """Rejects a pair whose longitude or latitude is out of range."""
    if value is None:
        return value
    lng, lat = value
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"longitude {lng} is outside [-180, 180]")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"latitude {lat} is outside [-90, 90]")
    return value


class SuccessResponse(BaseModel):
    """
    What:  Acknowledgement returned by admin write routes and the contact form.
    How:   `id` is set on creates so the admin UI can address the new row.
    """
    success: bool = Field(default=True)
    id: Optional[int] = Field(default=None, description="Primary key of a created row")
    message: Optional[str] = Field(default=None)

    model_config = ConfigDict(json_schema_extra={"examples": [{"success": True, "id": 7}]})


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "forbidden",
            "message": "Invalid credentials",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /api/health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    aqicn: str = Field(description="AQICN upstream: configured, not_configured, circuit_open")
    uptime_seconds: float = Field(description="Seconds since service started")
