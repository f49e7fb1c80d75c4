"""Audit sinks for webhook dispatch attempts.

The dispatcher writes one ``AuditRecord`` per attempt to whatever sink it
was given. The default sink emits a structlog event; tests and callers
with their own module-call log plug in their own implementation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from hookcast.logging import get_logger
from hookcast.models import AuditRecord


@runtime_checkable
class AuditSink(Protocol):
    """Protocol for audit log destinations."""

    @abstractmethod
    def record(self, entry: AuditRecord) -> None:
        """Persist or emit one audit record.

        Args:
            entry: Record describing a single dispatch attempt.
        """
        ...


class StructlogAuditSink:
    """Emit audit records as ``module_call`` structlog events."""

    def __init__(self, logger_name: str = "hookcast.audit") -> None:
        self._logger = get_logger(logger_name)

    def record(self, entry: AuditRecord) -> None:
        self._logger.info(
            "module_call",
            audit_id=entry.id,
            module=entry.module,
            endpoint=entry.endpoint,
            request=entry.request,
            response=entry.response,
            http_status=entry.http_status,
            kind=entry.kind,
            duration_ms=entry.duration_ms,
        )


class InMemoryAuditSink:
    """Keep audit records in a list. Useful for diagnostics and tests."""

    def __init__(self) -> None:
        self.records: list[AuditRecord] = []

    def record(self, entry: AuditRecord) -> None:
        self.records.append(entry)

    def clear(self) -> None:
        self.records.clear()


__all__ = ["AuditSink", "InMemoryAuditSink", "StructlogAuditSink"]
