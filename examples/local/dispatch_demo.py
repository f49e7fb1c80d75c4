#!/usr/bin/env python3
"""Dispatch demo - build a payload and send it without a real endpoint.

Demonstrates:
- build_payload(): map an event onto the webhook wire schema
- WebhookDispatcher.dispatch(): one POST, outcome captured
- Audit records for delivered, rejected and unsent notifications

Uses httpx.MockTransport, so no network access is needed.
"""

import json

import httpx

from hookcast import (
    ConfigurationError,
    DispatchConfig,
    Event,
    InMemoryAuditSink,
    WebhookDispatcher,
    build_payload,
    configure_logging,
)


def fake_endpoint(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/down":
        raise httpx.ConnectError("Connection refused", request=request)
    if request.url.path == "/reject":
        return httpx.Response(422, text="missing field")
    body = json.loads(request.content)
    return httpx.Response(200, json={"ok": True, "received": body["event_title"]})


def main() -> None:
    configure_logging(level="WARNING", format="text")
    audit = InMemoryAuditSink()
    dispatcher = WebhookDispatcher(audit_sink=audit, transport=httpx.MockTransport(fake_endpoint))

    event = Event(
        title="Invoice Created",
        message="Invoice #100 created",
        url="https://billing.example/invoice/100",
        attributes=[
            {"label": "Amount", "value": "$50.00"},
            {"label": "Client", "value": "Acme", "url": "https://billing.example/client/7"},
        ],
    )
    payload = build_payload(event)
    print("Payload:", payload.to_json())

    for path in ("/ok", "/reject", "/down"):
        outcome = dispatcher.dispatch(DispatchConfig(endpoint=f"https://hooks.example{path}"), payload)
        print(f"{path:8} status={outcome.status:16} kind={outcome.kind:18} http={outcome.http_status}")

    try:
        dispatcher.dispatch(DispatchConfig(endpoint=""), payload)
    except ConfigurationError as e:
        print("Refused:", e.message)

    print("\nAudit log:")
    for record in audit.records:
        print(f"  [{record.module}] {record.endpoint}")
        print("   ", record.response.replace("\n", " | "))


if __name__ == "__main__":
    main()
