"""
Portfolio Backend — Admin and Contact Request Schemas
=======================================================

Fields here are Optional on purpose: a missing secret key or a blank
contact field is a 400 with a specific message (raised by the service),
not FastAPI's generic 422.
"""

from typing import Dict, Optional

from pydantic import Field

from portfolio.schemas.common import CamelModel


class VerifyRequest(CamelModel):
    """Body of POST /api/admin/verify: {"secretKey": "..."}."""
    secret_key: Optional[str] = Field(default=None)


class InitDbResponse(CamelModel):
    """
    Returned by POST /api/admin/init-db.

    `seeded` maps each table name to the number of rows inserted; a table
    that already had content reports 0.
    """
    success: bool = True
    message: str = "Database initialized and seeded"
    seeded: Dict[str, int] = Field(default_factory=dict)


class ContactRequest(CamelModel):
    """Body of POST /api/contact."""
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=320)
    message: Optional[str] = Field(default=None, max_length=10_000)
