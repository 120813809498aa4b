"""
Portfolio Backend — Admin Gate Tests
======================================

What we test:
    ✅ Missing configuration is a ConfigurationError before anything else
    ✅ Missing or non-Bearer header → AuthenticationError
    ✅ Wrong token → AuthorizationError
    ✅ Surrounding whitespace on either side is ignored
    ✅ verify_secret: blank → ValidationError, mismatch → AuthorizationError
"""

import pytest

from portfolio.config import settings
from portfolio.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ValidationError,
)
from portfolio.services.auth_service import AdminGate


class TestAuthorizeHeader:

    def setup_method(self):
        self.gate = AdminGate()

    def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "admin_secret_key", "")
        with pytest.raises(ConfigurationError) as exc_info:
            self.gate.authorize_header("Bearer anything")
        assert exc_info.value.message == "Admin authentication not configured"

    def test_missing_header(self, admin_secret):
        with pytest.raises(AuthenticationError):
            self.gate.authorize_header(None)

    @pytest.mark.parametrize("header", ["Basic abc", "bearer test-admin-secret", "test-admin-secret"])
    def test_wrong_scheme(self, admin_secret, header):
        with pytest.raises(AuthenticationError):
            self.gate.authorize_header(header)

    def test_wrong_token(self, admin_secret):
        with pytest.raises(AuthorizationError):
            self.gate.authorize_header("Bearer not-the-secret")

    def test_correct_token(self, admin_secret):
        self.gate.authorize_header(f"Bearer {admin_secret}")

    def test_whitespace_trimmed(self, monkeypatch):
        monkeypatch.setattr(settings, "admin_secret_key", "  s3cret\n")
        self.gate.authorize_header("Bearer s3cret  ")


class TestVerifySecret:

    def setup_method(self):
        self.gate = AdminGate()

    @pytest.mark.parametrize("candidate", [None, "", "   "])
    def test_blank_is_validation_error(self, admin_secret, candidate):
        with pytest.raises(ValidationError):
            self.gate.verify_secret(candidate)

    def test_blank_reported_even_when_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "admin_secret_key", "")
        with pytest.raises(ValidationError):
            self.gate.verify_secret(None)

    def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "admin_secret_key", "")
        with pytest.raises(ConfigurationError):
            self.gate.verify_secret("guess")

    def test_mismatch(self, admin_secret):
        with pytest.raises(AuthorizationError):
            self.gate.verify_secret("guess")

    def test_match(self, admin_secret):
        self.gate.verify_secret(f" {admin_secret} ")
