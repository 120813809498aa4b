"""
Portfolio Backend — Career Schemas
====================================

What:  API contract for career positions (public timeline + admin editor).
Who:   GET /api/career returns CareerPositionResponse items; the admin
       routes accept CareerPositionRequest bodies.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from portfolio.schemas.common import CamelModel, Coordinates, check_coordinates


class CareerPositionResponse(CamelModel):
    """
    What:  One position on the resume timeline and map.

    Example:
        {
            "id": 2,
            "title": "GIS Manager",
            "company": "TRC Companies, Inc.",
            "location": "Austin, TX",
            "startDate": "2012-06",
            "endDate": "2018-03",
            "coordinates": [-97.7431, 30.2672],
            "accomplishments": ["Led GIS team ..."]
        }
    """
    id: int
    title: str
    company: str
    location: str
    start_date: str
    end_date: Optional[str] = Field(default=None, description="Null for the current position")
    coordinates: Coordinates
    accomplishments: List[str] = Field(default_factory=list)


class CareerPositionRequest(CamelModel):
    """
    What:  Body of POST /api/admin/career and PUT /api/admin/career/{id}.

    On update the accomplishments list replaces the stored one entirely,
    in the order given.
    """
    title: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    start_date: str = Field(min_length=1, max_length=32)
    end_date: Optional[str] = Field(default=None, max_length=32)
    coordinates: Coordinates
    accomplishments: List[str] = Field(default_factory=list)

    @field_validator("end_date")
    @classmethod
    def blank_end_date_is_current(cls, v: Optional[str]) -> Optional[str]:
        """The admin form sends "" for a current position."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Coordinates) -> Coordinates:
        return check_coordinates(v)

    @field_validator("accomplishments")
    @classmethod
    def drop_blank_accomplishments(cls, v: List[str]) -> List[str]:
        return [item.strip() for item in v if item and item.strip()]
