"""
Portfolio Backend — Admin Gate
================================

What:  Checks the shared admin secret for write operations.
Why:   The site has exactly one editor. A single bearer secret from the
       environment is enough; there are no users, sessions or roles.
How:   Both the bearer header (every admin route) and the verify endpoint
       (the admin login screen) compare against ADMIN_SECRET_KEY with
       hmac.compare_digest, after trimming surrounding whitespace.

Outcomes:
    secret not configured          → ConfigurationError   (500)
    header missing / not "Bearer " → AuthenticationError  (401)
    token does not match           → AuthorizationError   (403)
"""

import hmac
import logging
from typing import Optional

from portfolio.config import settings
from portfolio.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AdminGate:

    @staticmethod
    def _configured_secret() -> str:
        secret = (settings.admin_secret_key or "").strip()
        if not secret:
            logger.error("Admin request rejected: ADMIN_SECRET_KEY is not configured")
            raise ConfigurationError(message="Admin authentication not configured")
        return secret

    @staticmethod
    def _matches(candidate: str, secret: str) -> bool:
        return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))

    def authorize_header(self, authorization: Optional[str]) -> None:
        """
        Validate an `Authorization: Bearer <secret>` header.

        Raises:
            ConfigurationError, AuthenticationError, AuthorizationError
        """
        secret = self._configured_secret()

        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise AuthenticationError()

        token = authorization[len(BEARER_PREFIX):].strip()
        if not self._matches(token, secret):
            logger.warning("Admin request rejected: invalid bearer token")
            raise AuthorizationError()

    def verify_secret(self, candidate: Optional[str]) -> None:
        """
        Check a secret typed into the admin login form.

        A missing key is a client error (400) and is reported before the
        server configuration is looked at.
        """
        if candidate is None or not candidate.strip():
            raise ValidationError(message="Secret key required", field="secretKey")

        secret = self._configured_secret()
        if not self._matches(candidate.strip(), secret):
            logger.warning("Admin verify rejected: invalid secret")
            raise AuthorizationError()


admin_gate = AdminGate()
