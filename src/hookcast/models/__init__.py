"""Models for Hookcast.

Inputs:
    - Event, Attribute: notification raised upstream (read-only)
    - DispatchConfig: resolved per-dispatch configuration

Derived:
    - Payload, PayloadParam: wire document
    - DispatchOutcome: result of one attempt
    - AuditRecord: audit log entry for one attempt
    - SettingField: settings form descriptor
"""

from .audit import MODULE_TAG, AuditRecord, format_result
from .base import generate_id
from .dispatch import (
    NO_RESPONSE,
    DispatchConfig,
    DispatchOutcome,
    DispatchStatus,
    OutcomeKind,
)
from .event import Attribute, Event
from .module import SettingField, SettingType
from .payload import Payload, PayloadParam

__all__ = [
    # Inputs
    "Attribute",
    "Event",
    "DispatchConfig",
    # Derived
    "Payload",
    "PayloadParam",
    "DispatchOutcome",
    "DispatchStatus",
    "OutcomeKind",
    "NO_RESPONSE",
    # Audit
    "AuditRecord",
    "MODULE_TAG",
    "format_result",
    # Settings
    "SettingField",
    "SettingType",
    "generate_id",
]
