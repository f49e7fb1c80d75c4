"""Webhook dispatch: a single JSON POST with the outcome recorded for audit.

Each call is independent:
- a fresh HTTP client per attempt, closed before returning
- exactly one attempt, no retries
- one audit record per attempt, including attempts that never connected

Only a missing endpoint raises. Transport failures and non-2xx responses
are returned in the ``DispatchOutcome`` and written to the audit sink.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from hookcast.exceptions import ConfigurationError
from hookcast.logging import log_context
from hookcast.models import NO_RESPONSE, AuditRecord, DispatchConfig, DispatchOutcome

if TYPE_CHECKING:
    from hookcast.audit import AuditSink
    from hookcast.models import Payload

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {"Content-Type": "application/json"}


def parse_body(text: str) -> Any:
    """Decode a response body as JSON, falling back to the raw text.

    Returns None for an empty body.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def deadline_message(timeout_seconds: float) -> str:
    """Error text for a request that overran its overall deadline."""
    return f"Request timeout: no complete response within {timeout_seconds:g}s"


def describe_error(error: Exception) -> str:
    """Render a transport error for the outcome and audit record."""
    if isinstance(error, httpx.TimeoutException):
        return f"Request timeout: {error}" if str(error) else "Request timeout"
    return str(error) or type(error).__name__


def _check_deadline(deadline: float, timeout_seconds: float, request: httpx.Request) -> None:
    if time.monotonic() > deadline:
        raise httpx.ReadTimeout(
            f"no complete response within {timeout_seconds:g}s", request=request
        )


class WebhookDispatcher:
    """Sends webhook payloads and records each attempt.

    Example:
        ```python
        dispatcher = WebhookDispatcher()
        outcome = dispatcher.dispatch(
            DispatchConfig(endpoint="https://hooks.example/x"),
            build_payload(event),
        )
        if not outcome.ok:
            ...
        ```
    """

    def __init__(
        self,
        audit_sink: AuditSink | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
        max_body_chars: int | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            audit_sink: Destination for audit records. Defaults to a
                structlog-backed sink.
            transport: httpx transport for ``dispatch`` (tests pass a
                ``httpx.MockTransport``).
            async_transport: httpx transport for ``dispatch_async``.
            max_body_chars: Truncate response bodies in audit records.
        """
        if audit_sink is None:
            from hookcast.audit import StructlogAuditSink

            audit_sink = StructlogAuditSink()
        self._audit_sink = audit_sink
        self._transport = transport
        self._async_transport = async_transport
        self._max_body_chars = max_body_chars

    def dispatch(self, config: DispatchConfig, payload: Payload) -> DispatchOutcome:
        """POST a payload to the configured endpoint, blocking until done.

        The response is streamed and abandoned once ``config.timeout_seconds``
        has elapsed, so a slow body cannot hold the caller past the deadline
        by more than one read interval.

        Args:
            config: Resolved dispatch configuration.
            payload: Payload to send.

        Returns:
            Outcome of the attempt.

        Raises:
            ConfigurationError: If no endpoint is configured. No request is
                made and nothing is audited.
        """
        endpoint = self._require_endpoint(config)
        body = payload.to_json()
        started = time.monotonic()
        deadline = started + config.timeout_seconds

        with log_context(webhook_endpoint=endpoint):
            try:
                status_code, text = self._post(config, endpoint, body, deadline)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                outcome = self._failed(endpoint, body, started, describe_error(e))
            except Exception as e:
                logger.exception("Webhook dispatch error: %s", e)
                outcome = self._failed(endpoint, body, started, describe_error(e))
            else:
                outcome = self._received(endpoint, body, started, status_code, text)

            self._finish(outcome)
        return outcome

    async def dispatch_async(self, config: DispatchConfig, payload: Payload) -> DispatchOutcome:
        """Async variant of ``dispatch`` for use inside an event loop.

        The whole request, body included, runs under
        ``asyncio.timeout(config.timeout_seconds)``. Cancelling the awaiting
        task aborts the request; no audit record is written for a cancelled
        attempt.
        """
        endpoint = self._require_endpoint(config)
        body = payload.to_json()
        started = time.monotonic()

        with log_context(webhook_endpoint=endpoint):
            try:
                async with asyncio.timeout(config.timeout_seconds):
                    async with httpx.AsyncClient(
                        transport=self._async_transport, **self._client_options(config)
                    ) as client:
                        response = await client.post(
                            endpoint, content=body, headers=REQUEST_HEADERS
                        )
            except (httpx.RequestError, httpx.InvalidURL) as e:
                outcome = self._failed(endpoint, body, started, describe_error(e))
            except TimeoutError:
                outcome = self._failed(
                    endpoint, body, started, deadline_message(config.timeout_seconds)
                )
            except Exception as e:
                logger.exception("Webhook dispatch error: %s", e)
                outcome = self._failed(endpoint, body, started, describe_error(e))
            else:
                outcome = self._received(
                    endpoint, body, started, response.status_code, response.text
                )

            self._finish(outcome)
        return outcome

    def _post(
        self,
        config: DispatchConfig,
        endpoint: str,
        body: str,
        deadline: float,
    ) -> tuple[int, str]:
        """Send the request and read the body, enforcing the overall deadline."""
        with httpx.Client(transport=self._transport, **self._client_options(config)) as client:
            with client.stream("POST", endpoint, content=body, headers=REQUEST_HEADERS) as response:
                chunks: list[bytes] = []
                _check_deadline(deadline, config.timeout_seconds, response.request)
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    _check_deadline(deadline, config.timeout_seconds, response.request)
                text = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
                return response.status_code, text

    @staticmethod
    def _require_endpoint(config: DispatchConfig) -> str:
        if not config.has_endpoint:
            raise ConfigurationError("No endpoint configured")
        return config.endpoint  # type: ignore[return-value]

    @staticmethod
    def _client_options(config: DispatchConfig) -> dict[str, Any]:
        return {
            "timeout": config.timeout_seconds,
            "verify": not config.insecure_skip_verify,
            "follow_redirects": config.follow_redirects,
        }

    @staticmethod
    def _elapsed_ms(started: float) -> int:
        return int((time.monotonic() - started) * 1000)

    def _received(
        self,
        endpoint: str,
        body: str,
        started: float,
        status_code: int,
        text: str,
    ) -> DispatchOutcome:
        success = 200 <= status_code < 300
        return DispatchOutcome(
            status="delivered",
            kind="success" if success else "unexpected_status",
            http_status=status_code,
            response_body=parse_body(text),
            error=None if success else f"HTTP {status_code}",
            endpoint=endpoint,
            request_body=body,
            duration_ms=self._elapsed_ms(started),
        )

    def _failed(
        self,
        endpoint: str,
        body: str,
        started: float,
        message: str,
    ) -> DispatchOutcome:
        return DispatchOutcome(
            status="transport_failed",
            kind="transport_failure",
            http_status=NO_RESPONSE,
            error=message,
            endpoint=endpoint,
            request_body=body,
            duration_ms=self._elapsed_ms(started),
        )

    def _finish(self, outcome: DispatchOutcome) -> None:
        if outcome.kind == "success":
            logger.info(
                "Webhook delivered to %s (status %d)", outcome.endpoint, outcome.http_status
            )
        elif outcome.kind == "unexpected_status":
            logger.warning(
                "Webhook rejected by %s (status %d)", outcome.endpoint, outcome.http_status
            )
        else:
            logger.warning("Webhook not sent to %s: %s", outcome.endpoint, outcome.error)

        self._audit_sink.record(AuditRecord.for_outcome(outcome, self._max_body_chars))


def dispatch(
    config: DispatchConfig,
    payload: Payload,
    audit_sink: AuditSink | None = None,
) -> DispatchOutcome:
    """Convenience function to dispatch one payload with a default dispatcher.

    Args:
        config: Resolved dispatch configuration.
        payload: Payload to send.
        audit_sink: Optional audit destination.

    Returns:
        Outcome of the attempt.
    """
    return WebhookDispatcher(audit_sink=audit_sink).dispatch(config, payload)


__all__ = [
    "REQUEST_HEADERS",
    "WebhookDispatcher",
    "deadline_message",
    "describe_error",
    "dispatch",
    "parse_body",
]
