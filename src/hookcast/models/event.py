"""Notification event models.

Events are produced by an upstream rule engine and only read here. The
payload builder also accepts any object or mapping with the same field
names, so these models are the reference shape rather than a requirement.
"""

from pydantic import BaseModel, ConfigDict, Field


class Attribute(BaseModel):
    """One labelled detail attached to a notification.

    Attributes:
        label: Display label (e.g. "Amount").
        value: Display value (e.g. "$50.00").
        url: Optional link for the value.
        style: Optional free-form presentation hint.
        icon: Optional icon name or URL.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str | None = Field(default=None, description="Display label")
    value: str | None = Field(default=None, description="Display value")
    url: str | None = Field(default=None, description="Link for the value")
    style: str | None = Field(default=None, description="Presentation hint")
    icon: str | None = Field(default=None, description="Icon name or URL")


class Event(BaseModel):
    """A notification raised by the upstream event source.

    Attributes:
        title: Short title (e.g. "Invoice Created").
        message: Human-readable message.
        url: Canonical URL of the subject.
        attributes: Ordered list of attributes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = Field(default="", description="Notification title")
    message: str = Field(default="", description="Human-readable message")
    url: str = Field(default="", description="Canonical URL of the subject")
    attributes: list[Attribute] = Field(
        default_factory=list,
        description="Ordered attributes",
    )


__all__ = ["Attribute", "Event"]
