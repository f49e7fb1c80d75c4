"""Outbound webhook payload models.

The wire schema is fixed: field names and their order are part of the
contract with the receiving endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class PayloadParam(BaseModel):
    """One entry of ``event_params``. Absent values are empty strings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = ""
    value: str = ""
    url: str = ""
    style: str = ""
    icon: str = ""


class Payload(BaseModel):
    """JSON document POSTed to the webhook endpoint.

    Attributes:
        event_title: Notification title.
        event_url: Canonical URL of the subject.
        event_message: Human-readable message.
        event_params: Attributes in source order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    event_title: str = Field(default="", description="Notification title")
    event_url: str = Field(default="", description="Canonical URL of the subject")
    event_message: str = Field(default="", description="Human-readable message")
    event_params: list[PayloadParam] = Field(
        default_factory=list,
        description="Attributes in source order",
    )

    def to_json(self) -> str:
        """Serialise to the compact JSON document sent on the wire."""
        return self.model_dump_json()


__all__ = ["Payload", "PayloadParam"]
