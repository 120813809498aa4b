"""
Portfolio Backend — Contact Form Service
==========================================

What:  Validates a contact message and emails it to the site owner.
How:   Checks run cheapest first: required fields, email shape, the per-IP
       limit, then the mail provider configuration. Only a message that
       passes all of them reaches Resend.
Who:   POST /api/contact.

Outcomes:
    blank field             → ValidationError          (400)
    malformed email         → ValidationError          (400)
    over the per-IP limit   → RateLimitExceededError   (429)
    RESEND_API_KEY missing  → ConfigurationError       (500)
    Resend call fails       → EmailDeliveryError       (503)
"""

import logging
import re
from typing import Any, Dict, Optional

import resend
from starlette.concurrency import run_in_threadpool

from portfolio.config import settings
from portfolio.exceptions import (
    ConfigurationError,
    EmailDeliveryError,
    RateLimitExceededError,
    ValidationError,
)
from portfolio.middleware.rate_limit import SlidingWindowLimiter
from portfolio.schemas.admin import ContactRequest

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def build_email(name: str, email: str, message: str) -> Dict[str, Any]:
    """Resend payload for one contact message. Replies go to the sender."""
    return {
        "from": settings.contact_from,
        "to": [settings.contact_email],
        "subject": f"Portfolio Contact: {name}",
        "text": f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}",
        "reply_to": email,
    }


class ContactService:

    def __init__(self, limiter: Optional[SlidingWindowLimiter] = None):
        self.limiter = limiter or SlidingWindowLimiter(
            limit=settings.contact_rate_limit,
            window=settings.contact_rate_window,
        )

    async def submit(self, payload: ContactRequest, client_ip: str) -> None:
        name = (payload.name or "").strip()
        email = (payload.email or "").strip()
        message = (payload.message or "").strip()

        if not name or not email or not message:
            raise ValidationError(message="Name, email, and message are required")
        if not EMAIL_PATTERN.match(email):
            raise ValidationError(message="Invalid email format", field="email")

        retry_after = self.limiter.hit(client_ip)
        if retry_after is not None:
            logger.warning("Contact form rate limit hit for IP %s", client_ip)
            raise RateLimitExceededError(
                retry_after=retry_after,
                message="Too many requests. Please try again later.",
            )

        api_key = settings.resend_api_key
        if not api_key:
            logger.error("Contact message dropped: RESEND_API_KEY is not configured")
            raise ConfigurationError(message="Email service not configured")

        await self._send(api_key, build_email(name, email, message))

    @staticmethod
    async def _send(api_key: str, params: Dict[str, Any]) -> None:
        # The Resend SDK is synchronous and keeps its key module-level
        resend.api_key = api_key
        try:
            result = await run_in_threadpool(resend.Emails.send, params)
        except Exception as e:
            logger.error("Resend rejected contact message: %s", e, exc_info=True)
            raise EmailDeliveryError(context={"error_type": type(e).__name__})

        logger.info("Contact message sent (id=%s)", (result or {}).get("id"))


contact_service = ContactService()
