"""Configuration management for Hookcast."""

import logging
import warnings
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process-wide defaults for webhook notifications.

    Per-rule values (the endpoint) come from the caller's configuration
    store; these settings supply the transport defaults applied to every
    dispatch. All fields can be set through ``HOOKCAST_``-prefixed
    environment variables or a ``.env`` file.
    """

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    # Transport
    request_timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        le=300.0,
        description="Overall deadline for a single webhook POST, response body included",
    )
    insecure_skip_verify: bool = Field(
        default=False,
        description=(
            "Skip TLS certificate and hostname verification. Only for internal "
            "endpoints with self-signed or mismatched certificates."
        ),
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects returned by the endpoint",
    )

    # Module behaviour
    suppress_when_disabled: bool = Field(
        default=False,
        description=(
            "Skip dispatch entirely when the module's webhookenabled setting is off. "
            "When False, the flag only affects test_connection()."
        ),
    )
    audit_max_body_chars: int = Field(
        default=10000,
        ge=100,
        le=1_000_000,
        description="Maximum characters of the response body kept in an audit record",
    )

    model_config = {
        "env_prefix": "HOOKCAST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def warn_on_insecure_transport(self) -> "Settings":
        """Warn when TLS verification has been turned off globally."""
        if self.insecure_skip_verify:
            warnings.warn(
                "HOOKCAST_INSECURE_SKIP_VERIFY is enabled. Webhook endpoints will not "
                "have their TLS certificates verified.",
                UserWarning,
                stacklevel=2,
            )
            logger.warning("TLS verification disabled for webhook dispatch")
        return self


# Global settings instance
settings = Settings()
