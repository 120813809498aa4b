"""
Portfolio Backend — Skill Schemas
"""

from pydantic import Field

from portfolio.schemas.common import CamelModel


class SkillResponse(CamelModel):
    id: int
    name: str
    category: str
    proficiency: int = Field(ge=1, le=5)


class SkillRequest(CamelModel):
    """Body of POST /api/admin/skills and PUT /api/admin/skills/{id}."""
    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    proficiency: int = Field(ge=1, le=5, description="Self-rated 1 (familiar) to 5 (expert)")
