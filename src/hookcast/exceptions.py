"""Hookcast exception hierarchy.

Only configuration problems are raised out of the dispatch path. Transport
failures and non-2xx responses are captured into a ``DispatchOutcome``
instead, so a misbehaving endpoint cannot break the caller's rule engine.
"""

from __future__ import annotations


class HookcastError(Exception):
    """Base exception for all Hookcast errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "hookcast_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class ValidationError(HookcastError):
    """Invalid module or notification setting.

    Attributes:
        field: The setting that failed validation.
        message: Description of the validation failure.
    """

    code: str = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "field": self.field,
                "message": self.message,
            }
        }


class ConfigurationError(HookcastError):
    """Configuration error.

    Raised when no endpoint is configured for a notification. Raised before
    any network attempt is made.
    """

    code: str = "configuration_error"
