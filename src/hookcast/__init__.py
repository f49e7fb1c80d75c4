"""Hookcast: deliver notification events to a webhook endpoint.

Builds a fixed-schema JSON payload from an event, POSTs it once to an
operator-configured URL, and records every attempt in an audit log.

Quick Start:
    from hookcast import DispatchConfig, Event, WebhookDispatcher, build_payload

    event = Event(
        title="Invoice Created",
        message="Invoice #100 created",
        url="https://billing.example/invoice/100",
        attributes=[{"label": "Amount", "value": "$50.00"}],
    )
    outcome = WebhookDispatcher().dispatch(
        DispatchConfig(endpoint="https://hooks.example/x"),
        build_payload(event),
    )
    print(outcome.http_status, outcome.response_body)
"""

__version__ = "0.1.0"

# Audit
from .audit import AuditSink, InMemoryAuditSink, StructlogAuditSink

# Configuration
from .config import Settings, settings

# Dispatch
from .dispatch import WebhookDispatcher, dispatch

# Exceptions
from .exceptions import ConfigurationError, HookcastError, ValidationError

# Logging
from .logging import configure_logging, get_logger, log_context

# Models
from .models import (
    Attribute,
    AuditRecord,
    DispatchConfig,
    DispatchOutcome,
    Event,
    Payload,
    PayloadParam,
)

# Module surface
from .module import WebhookModule, send_notification

# Payload
from .payload import build_payload

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "HookcastError",
    "ConfigurationError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
    # Models
    "Attribute",
    "Event",
    "Payload",
    "PayloadParam",
    "DispatchConfig",
    "DispatchOutcome",
    "AuditRecord",
    # Components
    "build_payload",
    "WebhookDispatcher",
    "dispatch",
    "AuditSink",
    "StructlogAuditSink",
    "InMemoryAuditSink",
    "WebhookModule",
    "send_notification",
]
