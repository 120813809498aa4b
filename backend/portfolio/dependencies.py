"""
Portfolio Backend — Shared Route Dependencies
===============================================

What:  FastAPI dependencies used across routers.
How:   `require_admin` is attached to the admin router with
       `dependencies=[Depends(require_admin)]`, so every write route is
       gated without repeating the check in each handler.
"""

from typing import Optional

from fastapi import Header

from portfolio.services.auth_service import admin_gate


async def require_admin(
    authorization: Optional[str] = Header(
        default=None,
        description="Bearer <ADMIN_SECRET_KEY>",
    ),
) -> None:
    """
    Raises:
        ConfigurationError (500), AuthenticationError (401),
        AuthorizationError (403)
    """
    admin_gate.authorize_header(authorization)
