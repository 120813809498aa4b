"""
Portfolio Backend — ORM Models
================================

Importing this package registers every table on `Base.metadata`, which is
what create_schema() and Alembic's autogenerate rely on.
"""

from portfolio.models.career import CareerAccomplishment, CareerPosition
from portfolio.models.education import Education
from portfolio.models.skill import Skill
from portfolio.models.station import AirQualityStation

__all__ = [
    "AirQualityStation",
    "CareerAccomplishment",
    "CareerPosition",
    "Education",
    "Skill",
]
