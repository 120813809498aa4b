"""
Portfolio Backend — Education Schemas
"""

from typing import List, Optional

from pydantic import Field, field_validator

from portfolio.schemas.common import CamelModel, Coordinates, check_coordinates


class EducationResponse(CamelModel):
    """
    coordinates is null unless both longitude and latitude are stored.
    """
    id: int
    degree: str
    field_of_study: str
    institution: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    accomplishments: List[str] = Field(default_factory=list)


class EducationRequest(CamelModel):
    """Body of POST /api/admin/education and PUT /api/admin/education/{id}."""
    degree: str = Field(min_length=1, max_length=255)
    field_of_study: str = Field(min_length=1, max_length=255)
    institution: str = Field(min_length=1, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    start_date: Optional[str] = Field(default=None, max_length=32)
    end_date: Optional[str] = Field(default=None, max_length=32)
    gpa: Optional[str] = Field(default=None, max_length=16)
    coordinates: Optional[Coordinates] = None
    accomplishments: List[str] = Field(default_factory=list)

    @field_validator("location", "start_date", "end_date", "gpa")
    @classmethod
    def blank_is_null(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Optional[Coordinates]) -> Optional[Coordinates]:
        return check_coordinates(v)

    @field_validator("accomplishments")
    @classmethod
    def drop_blank_accomplishments(cls, v: List[str]) -> List[str]:
        return [item.strip() for item in v if item and item.strip()]
