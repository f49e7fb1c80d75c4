"""Setting field descriptors for the notification module's settings form."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Field types understood by the settings UI
SettingType = Literal["text", "textarea", "yesno", "system", "dynamic", "password"]


class SettingField(BaseModel):
    """Describes one input of a settings form rendered by the caller's UI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    friendly_name: str = Field(description="Label shown next to the input")
    type: SettingType = Field(description="Input type")
    description: str = Field(default="", description="Help text")
    default: Any = Field(default=None, description="Initial value")
    required: bool = Field(default=False, description="Whether a value must be supplied")


__all__ = ["SettingField", "SettingType"]
