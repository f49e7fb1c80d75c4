"""Payload builder: map a notification event onto the webhook wire schema.

The event model belongs to the upstream producer, so fields are read by
name from pydantic models, plain objects, or mappings alike.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from hookcast.models import Payload, PayloadParam

_PARAM_FIELDS = ("label", "value", "url", "style", "icon")


def _read(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _text(value: Any) -> str:
    """Render a field as a string; absent values become ``""``."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def build_param(attribute: Any) -> PayloadParam:
    """Build one ``event_params`` entry from an attribute."""
    return PayloadParam(**{name: _text(_read(attribute, name)) for name in _PARAM_FIELDS})


def build_payload(event: Any, attributes: Iterable[Any] | None = None) -> Payload:
    """Build the webhook payload for an event.

    Pure and deterministic: the same input always yields the same JSON.

    Args:
        event: Object or mapping with ``title``, ``message``, ``url`` and
            optionally ``attributes``.
        attributes: Attributes to send. Defaults to ``event.attributes``.

    Returns:
        Payload with ``event_params`` matching ``attributes`` one-to-one, in
        order. Empty when there are no attributes, never None.
    """
    if attributes is None:
        attributes = _read(event, "attributes") or []

    return Payload(
        event_title=_text(_read(event, "title")),
        event_url=_text(_read(event, "url")),
        event_message=_text(_read(event, "message")),
        event_params=[build_param(attribute) for attribute in attributes],
    )


__all__ = ["build_param", "build_payload"]
