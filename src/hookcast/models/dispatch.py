"""Dispatch configuration and outcome models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Whether a response was received at all
DispatchStatus = Literal["delivered", "transport_failed"]

# Finer classification for programmatic callers
OutcomeKind = Literal["success", "unexpected_status", "transport_failure"]

# Sentinel http_status when the connection never produced a response
NO_RESPONSE = 0


class DispatchConfig(BaseModel):
    """Resolved configuration for a single dispatch.

    Read once per dispatch and never mutated.

    Attributes:
        endpoint: Destination URL. Only checked for being non-empty.
        enabled: Module-level enabled flag as supplied by the caller.
        timeout_seconds: Bound on the whole request.
        insecure_skip_verify: Disable TLS certificate and hostname checks.
        follow_redirects: Follow HTTP redirects.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    endpoint: str | None = Field(default=None, description="Destination URL")
    enabled: bool = Field(default=True, description="Module enabled flag")
    timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        description="Request timeout in seconds",
    )
    insecure_skip_verify: bool = Field(
        default=False,
        description="Skip TLS certificate verification",
    )
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")

    @property
    def has_endpoint(self) -> bool:
        """Check whether a usable (non-blank) endpoint is set."""
        return bool(self.endpoint and self.endpoint.strip())


class DispatchOutcome(BaseModel):
    """Result of one dispatch attempt.

    ``status == "delivered"`` only means a response was received; check
    ``ok`` or ``kind`` for whether the endpoint accepted it.

    Attributes:
        status: delivered or transport_failed.
        kind: success (2xx), unexpected_status (any other status), or
            transport_failure (no response).
        http_status: HTTP status code, or 0 when no response was received.
        response_body: Parsed JSON body, raw text if it was not JSON, or None
            when the body was empty or no response arrived.
        error: Transport error description (or status summary for non-2xx).
        endpoint: URL the payload was sent to.
        request_body: The JSON document that was sent.
        duration_ms: Wall time of the attempt.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: DispatchStatus
    kind: OutcomeKind
    http_status: int = Field(default=NO_RESPONSE, ge=0)
    response_body: Any = None
    error: str | None = None
    endpoint: str
    request_body: str
    duration_ms: int = Field(default=0, ge=0)

    @property
    def ok(self) -> bool:
        """True when the endpoint answered with a 2xx status."""
        return self.kind == "success"

    @property
    def delivered(self) -> bool:
        """True when any HTTP response was received."""
        return self.status == "delivered"


__all__ = [
    "NO_RESPONSE",
    "DispatchConfig",
    "DispatchOutcome",
    "DispatchStatus",
    "OutcomeKind",
]
