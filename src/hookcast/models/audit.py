"""AuditRecord model - one entry per webhook dispatch attempt."""

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import generate_id
from .dispatch import DispatchOutcome, OutcomeKind

# Source tag identifying this module in the audit log
MODULE_TAG = "webhook"


def _render_body(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, str):
        return body
    return json.dumps(body, ensure_ascii=False)


def format_result(http_status: int, body: Any) -> str:
    """Format the audit result line: ``HTTP Code: <n>`` then the body.

    Args:
        http_status: Status code (0 when no response was received).
        body: Parsed JSON, raw text, an error description, or None.
    """
    return f"HTTP Code: {http_status}\n{_render_body(body)}"


class AuditRecord(BaseModel):
    """Audit log entry for one dispatch attempt.

    Lets an operator tell "not sent" (http_status 0, transport_failure)
    apart from "sent but rejected" (non-2xx status).

    Attributes:
        id: Unique identifier for this record.
        timestamp: When the attempt finished.
        module: Fixed source tag ("webhook").
        endpoint: Destination URL.
        request: Outgoing JSON document.
        response: Result line, see ``format_result``.
        http_status: Status code, 0 if no response.
        kind: Outcome classification.
        duration_ms: Wall time of the attempt.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=lambda: generate_id("audit"))
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the attempt finished",
    )
    module: str = Field(default=MODULE_TAG, description="Source tag")
    endpoint: str = Field(description="Destination URL")
    request: str = Field(description="Outgoing JSON document")
    response: str = Field(description="HTTP Code line followed by body or error")
    http_status: int = Field(default=0, ge=0, description="HTTP status code")
    kind: OutcomeKind = Field(description="Outcome classification")
    duration_ms: int = Field(default=0, ge=0, description="Attempt duration in milliseconds")

    @classmethod
    def for_outcome(
        cls,
        outcome: DispatchOutcome,
        max_body_chars: int | None = None,
    ) -> "AuditRecord":
        """Create an audit record from a dispatch outcome.

        Transport failures record the error text in place of a body.

        Args:
            outcome: Completed dispatch outcome.
            max_body_chars: Truncate the rendered body to this many characters.
        """
        body = outcome.error if outcome.kind == "transport_failure" else outcome.response_body
        rendered = _render_body(body)
        if max_body_chars is not None and len(rendered) > max_body_chars:
            rendered = rendered[:max_body_chars]
        return cls(
            endpoint=outcome.endpoint,
            request=outcome.request_body,
            response=format_result(outcome.http_status, rendered),
            http_status=outcome.http_status,
            kind=outcome.kind,
            duration_ms=outcome.duration_ms,
        )


__all__ = ["MODULE_TAG", "AuditRecord", "format_result"]
