"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import httpx
import pytest

from hookcast.audit import InMemoryAuditSink
from hookcast.models import Attribute, DispatchConfig, Event

ENDPOINT = "https://hooks.example/x"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies in turn.

    Each reply is either an ``httpx.Response`` or an exception instance to
    raise, e.g. ``httpx.ConnectError``.
    """

    def __init__(self, *replies: httpx.Response | Exception) -> None:
        self._replies = list(replies) or [httpx.Response(200)]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def audit_sink() -> InMemoryAuditSink:
    """Create an in-memory audit sink."""
    return InMemoryAuditSink()


@pytest.fixture
def invoice_event() -> Event:
    """Create the invoice notification used across tests."""
    return Event(
        title="Invoice Created",
        message="Invoice #100 created",
        url="https://x/invoice/100",
        attributes=[Attribute(label="Amount", value="$50.00")],
    )


@pytest.fixture
def config() -> DispatchConfig:
    """Create a dispatch config pointing at the test endpoint."""
    return DispatchConfig(endpoint=ENDPOINT)

