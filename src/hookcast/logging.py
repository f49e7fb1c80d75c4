"""Structured logging for Hookcast.

Audit records and diagnostics go through structlog: JSON lines in
production, coloured console output in development. Each dispatch binds
its endpoint (and, from the notification module, the event title) with
``log_context`` so every structlog line written during that dispatch,
including the audit line, carries them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor, WrappedLogger

_configured = False

# Event fields that may carry whole payloads or response bodies
_LONG_FIELDS = ("request", "response")


def limit_field_length(max_chars: int) -> Processor:
    """Build a processor that cuts payload-sized fields to ``max_chars``.

    Only the ``request`` and ``response`` fields are touched; a trailing
    marker records how many characters were dropped.
    """

    def processor(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        for key in _LONG_FIELDS:
            value = event_dict.get(key)
            if isinstance(value, str) and len(value) > max_chars:
                dropped = len(value) - max_chars
                event_dict[key] = f"{value[:max_chars]}...[{dropped} more chars]"
        return event_dict

    return processor


def configure_logging(
    level: str | None = None,
    format: str | None = None,
    max_field_chars: int | None = None,
) -> None:
    """Configure structured logging for Hookcast.

    Arguments left as None are read from ``hookcast.config.settings``
    (``HOOKCAST_LOG_LEVEL``, ``HOOKCAST_LOG_FORMAT`` and
    ``HOOKCAST_AUDIT_MAX_BODY_CHARS``).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: "json" for production, "text" for development.
        max_field_chars: Limit for the ``request``/``response`` fields.
    """
    global _configured

    if level is None or format is None or max_field_chars is None:
        from hookcast.config import settings

        level = level or settings.log_level
        format = format or settings.log_format
        if max_field_chars is None:
            max_field_chars = settings.audit_max_body_chars

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        limit_field_length(max_field_chars),
    ]
    if format.lower() == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, configuring logging from settings on first use."""
    if not _configured:
        configure_logging()

    return structlog.get_logger(name)  # type: ignore[no-any-return]


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Bind values to every structlog line emitted inside the block.

    Bindings are restored on exit, so nested dispatches (or concurrent
    tasks, which each get their own context) do not leak into each other.

    Example:
        ```python
        with log_context(webhook_endpoint="https://hooks.example/x"):
            get_logger().info("sending")  # includes webhook_endpoint
        ```
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield
