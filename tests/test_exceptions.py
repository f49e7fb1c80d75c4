"""Tests for Hookcast exception hierarchy."""

import pytest

from hookcast.exceptions import ConfigurationError, HookcastError, ValidationError


class TestHookcastError:
    """Tests for the base HookcastError class."""

    def test_error_message(self):
        """Should store and return message."""
        error = HookcastError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_error_code(self):
        """Should have default error code."""
        assert HookcastError("test").code == "hookcast_error"

    def test_to_dict(self):
        """Should convert to API-friendly dict."""
        assert HookcastError("Something went wrong").to_dict() == {
            "error": {
                "code": "hookcast_error",
                "message": "Something went wrong",
            }
        }

    def test_inheritance(self):
        """All custom exceptions should inherit from HookcastError."""
        for exc in [ValidationError("field", "invalid"), ConfigurationError("missing")]:
            assert isinstance(exc, HookcastError)
            assert isinstance(exc, Exception)


class TestValidationError:
    """Tests for ValidationError."""

    def test_field_and_message(self):
        """Should store field and message."""
        error = ValidationError("timeout_seconds", "must be greater than 0")
        assert error.field == "timeout_seconds"
        assert error.message == "timeout_seconds: must be greater than 0"

    def test_to_dict_includes_field(self):
        """Should include field in dict representation."""
        result = ValidationError("endpoint", "expected a URL string").to_dict()
        assert result["error"]["code"] == "validation_error"
        assert result["error"]["field"] == "endpoint"


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_error_code(self):
        """ConfigurationError should have correct code."""
        error = ConfigurationError("No endpoint configured")
        assert error.code == "configuration_error"
        assert error.message == "No endpoint configured"

    def test_catch_with_base_class(self):
        """Should be catchable as HookcastError."""
        with pytest.raises(HookcastError):
            raise ConfigurationError("No endpoint configured")
