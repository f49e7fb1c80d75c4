"""Unit tests for Hookcast configuration."""

import os
import warnings
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from hookcast.config import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_settings(self):
        """Default settings should be secure and bounded."""
        # Use _env_file=None to prevent reading from .env file
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.request_timeout_seconds == 15.0
        assert settings.insecure_skip_verify is False
        assert settings.follow_redirects is True
        assert settings.suppress_when_disabled is False
        assert settings.audit_max_body_chars == 10000

    def test_log_formats(self):
        """Only valid log formats should be accepted."""
        assert Settings(_env_file=None, log_format="text").log_format == "text"
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_timeout_bounds(self):
        """The request timeout must be finite and positive."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout_seconds=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout_seconds=301)

    def test_audit_body_bounds(self):
        """The audit truncation limit must stay within range."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, audit_max_body_chars=10)

    def test_env_prefix(self):
        """Settings should use HOOKCAST_ prefix for environment variables."""
        with patch.dict(os.environ, {"HOOKCAST_LOG_LEVEL": "DEBUG"}):
            settings = Settings(_env_file=None)
            assert settings.log_level == "DEBUG"

    def test_env_timeout(self):
        """HOOKCAST_REQUEST_TIMEOUT_SECONDS should override the default."""
        with patch.dict(os.environ, {"HOOKCAST_REQUEST_TIMEOUT_SECONDS": "25"}):
            settings = Settings(_env_file=None)
            assert settings.request_timeout_seconds == 25.0


class TestInsecureTransport:
    """Tests for the insecure_skip_verify warning."""

    def test_warns_when_verification_disabled(self):
        """Turning off TLS verification should emit a warning."""
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            settings = Settings(_env_file=None, insecure_skip_verify=True)
        assert settings.insecure_skip_verify is True
        assert len(w) == 1
        assert "INSECURE_SKIP_VERIFY" in str(w[0].message)

    def test_no_warning_by_default(self):
        """Secure defaults should not warn."""
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            Settings(_env_file=None)
        assert len(w) == 0
