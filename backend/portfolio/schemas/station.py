"""
Portfolio Backend — Air Quality Station Schemas
=================================================

What:  Station shape shared by the database-backed demo (/api/stations)
       and the live AQICN proxy (/api/aqicn/stations).
Why:   The map and explorer components render either source with the same
       code, so both endpoints return identical objects.
"""

from typing import Optional

from pydantic import Field, field_validator

from portfolio.schemas.common import CamelModel, Coordinates, check_coordinates


class StationResponse(CamelModel):
    """
    Example:
        {
            "id": 1,
            "name": "Denver - CAMP",
            "location": "Denver, CO",
            "coordinates": [-104.9876, 39.7392],
            "aqi": 42,
            "category": "Good",
            "pollutant": "PM2.5",
            "lastUpdated": "2024-01-15T10:30:00Z",
            "status": "active"
        }
    """
    id: int
    name: str
    location: str
    coordinates: Coordinates
    aqi: int
    category: str
    pollutant: str
    last_updated: str
    status: str


class StationRequest(CamelModel):
    """
    Body of POST /api/admin/stations and PUT /api/admin/stations/{id}.

    category may be omitted, in which case it is derived from aqi.
    """
    name: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    coordinates: Coordinates
    aqi: int = Field(ge=0, le=999)
    category: Optional[str] = Field(default=None, max_length=64)
    pollutant: str = Field(min_length=1, max_length=32)
    last_updated: str = Field(min_length=1, max_length=64)
    status: str = Field(default="active", pattern=r"^(active|inactive)$")

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Coordinates) -> Coordinates:
        return check_coordinates(v)

    @field_validator("category")
    @classmethod
    def blank_category_is_derived(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()
