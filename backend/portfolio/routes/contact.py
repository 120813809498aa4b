"""
Portfolio Backend — Contact Route
===================================

What:  POST /api/contact, the site's contact form.
How:   The body fields are optional in the schema so that a blank form gets
       the service's 400 message rather than a 422.
"""

from fastapi import APIRouter, Request

from portfolio.middleware.rate_limit import get_client_ip
from portfolio.schemas.admin import ContactRequest
from portfolio.schemas.common import ErrorResponse, SuccessResponse
from portfolio.services.contact_service import contact_service

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Missing field or invalid email", "model": ErrorResponse},
        429: {"description": "Too many messages from this IP", "model": ErrorResponse},
        500: {"description": "Email service not configured", "model": ErrorResponse},
        503: {"description": "Email provider failed", "model": ErrorResponse},
    },
    summary="Send a contact message",
)
async def send_contact(body: ContactRequest, request: Request) -> SuccessResponse:
    await contact_service.submit(body, get_client_ip(request))
    return SuccessResponse()
