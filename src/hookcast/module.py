"""WebHook notification module.

Adapts the caller's notification-module contract (settings forms, a
connection test, and ``send_notification``) onto the payload builder and
dispatcher. The caller's rule engine invokes ``send_notification`` when a
rule fires, passing the module-level and per-rule settings it has stored.

Example:
    ```python
    from hookcast.module import WebhookModule

    module = WebhookModule()
    outcome = module.send_notification(
        event,
        module_settings={"webhookenabled": "on"},
        notification_settings={"endpoint": "https://hooks.example/x"},
    )
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from hookcast.config import Settings
from hookcast.dispatch import WebhookDispatcher
from hookcast.exceptions import ValidationError
from hookcast.logging import log_context
from hookcast.models import DispatchConfig, SettingField
from hookcast.payload import build_payload

if TYPE_CHECKING:
    from hookcast.audit import AuditSink
    from hookcast.models import DispatchOutcome

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"1", "on", "yes", "true"})
_FALSE_STRINGS = frozenset({"", "0", "off", "no", "false"})


def as_bool(value: Any, field: str, default: bool) -> bool:
    """Interpret a stored yes/no setting.

    Args:
        value: Stored value (bool, int, string, or None).
        field: Setting name, used in error messages.
        default: Value used when the setting is absent.

    Raises:
        ValidationError: If the value cannot be read as a boolean.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValidationError(field, f"expected a yes/no value, got {value!r}")


def as_timeout(value: Any, field: str, default: float) -> float:
    """Interpret a stored timeout in seconds.

    Raises:
        ValidationError: If the value is not a positive number.
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(field, f"expected a number of seconds, got {value!r}")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValidationError(field, f"expected a number of seconds, got {value!r}") from None
    if seconds <= 0:
        raise ValidationError(field, "must be greater than 0")
    return seconds


class WebhookModule:
    """Notification module that delivers events to a webhook endpoint."""

    display_name = "WebHook"
    logo_file_name = "logo.png"

    def __init__(
        self,
        settings: Settings | None = None,
        dispatcher: WebhookDispatcher | None = None,
        audit_sink: AuditSink | None = None,
    ) -> None:
        """Initialize the module.

        Args:
            settings: Process-wide defaults. Uses the global settings if None.
            dispatcher: Dispatcher to use. Built from ``settings`` if None.
            audit_sink: Audit destination for a dispatcher built here.
        """
        if settings is None:
            from hookcast.config import settings as global_settings

            settings = global_settings
        self._settings = settings
        self._dispatcher = dispatcher or WebhookDispatcher(
            audit_sink=audit_sink,
            max_body_chars=settings.audit_max_body_chars,
        )

    def settings(self) -> dict[str, SettingField]:
        """Module-level settings form."""
        return {
            "webhookenabled": SettingField(
                friendly_name="Enable WebHook Notifications",
                type="yesno",
                default=True,
            ),
            "insecure_skip_verify": SettingField(
                friendly_name="Skip TLS Verification",
                type="yesno",
                description=(
                    "Accept self-signed or hostname-mismatched certificates. "
                    "Only use for endpoints on a trusted internal network."
                ),
                default=self._settings.insecure_skip_verify,
            ),
            "timeout_seconds": SettingField(
                friendly_name="Request Timeout",
                type="text",
                description="Seconds to wait for the endpoint before giving up",
                default=self._settings.request_timeout_seconds,
            ),
        }

    def notification_settings(self) -> dict[str, SettingField]:
        """Per-rule settings form."""
        return {
            "endpoint": SettingField(
                friendly_name="Webhook Endpoint",
                type="text",
                description="Enter the URL for the webhook that should be notified",
                required=True,
            ),
        }

    def test_connection(self, settings: Mapping[str, Any]) -> bool:
        """Validate module settings before they are saved.

        There is no remote service to authenticate against, so this only
        reports whether the module is enabled.
        """
        return as_bool(settings.get("webhookenabled"), "webhookenabled", default=True)

    def get_dynamic_field(self, field_name: str, settings: Mapping[str, Any]) -> dict[str, Any]:
        """Option values for ``dynamic`` settings. This module has none."""
        return {}

    def resolve_config(
        self,
        module_settings: Mapping[str, Any] | None,
        notification_settings: Mapping[str, Any] | None,
    ) -> DispatchConfig:
        """Combine stored settings and process defaults into a DispatchConfig.

        The endpoint is not validated here; the dispatcher rejects a
        missing one.

        Raises:
            ValidationError: If a stored setting has the wrong type.
        """
        module_settings = module_settings or {}
        notification_settings = notification_settings or {}

        endpoint = notification_settings.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise ValidationError("endpoint", f"expected a URL string, got {endpoint!r}")

        return DispatchConfig(
            endpoint=endpoint,
            enabled=as_bool(module_settings.get("webhookenabled"), "webhookenabled", True),
            timeout_seconds=as_timeout(
                module_settings.get("timeout_seconds"),
                "timeout_seconds",
                self._settings.request_timeout_seconds,
            ),
            insecure_skip_verify=as_bool(
                module_settings.get("insecure_skip_verify"),
                "insecure_skip_verify",
                self._settings.insecure_skip_verify,
            ),
            follow_redirects=self._settings.follow_redirects,
        )

    def _should_skip(self, config: DispatchConfig) -> bool:
        if not config.enabled and self._settings.suppress_when_disabled:
            logger.info("WebHook notifications disabled, skipping dispatch to %s", config.endpoint)
            return True
        return False

    def send_notification(
        self,
        notification: Any,
        module_settings: Mapping[str, Any] | None = None,
        notification_settings: Mapping[str, Any] | None = None,
    ) -> DispatchOutcome | None:
        """Deliver a notification when its rule fires.

        Args:
            notification: Event with title, message, url and attributes.
            module_settings: Stored module-level settings.
            notification_settings: Stored per-rule settings (``endpoint``).

        Returns:
            The dispatch outcome, or None when the module is disabled and
            ``suppress_when_disabled`` is set.

        Raises:
            ConfigurationError: If the rule has no endpoint.
            ValidationError: If a stored setting has the wrong type.
        """
        config = self.resolve_config(module_settings, notification_settings)
        if self._should_skip(config):
            return None
        payload = build_payload(notification)
        with log_context(event_title=payload.event_title):
            return self._dispatcher.dispatch(config, payload)

    async def send_notification_async(
        self,
        notification: Any,
        module_settings: Mapping[str, Any] | None = None,
        notification_settings: Mapping[str, Any] | None = None,
    ) -> DispatchOutcome | None:
        """Async variant of ``send_notification``."""
        config = self.resolve_config(module_settings, notification_settings)
        if self._should_skip(config):
            return None
        payload = build_payload(notification)
        with log_context(event_title=payload.event_title):
            return await self._dispatcher.dispatch_async(config, payload)


def send_notification(
    notification: Any,
    module_settings: Mapping[str, Any] | None = None,
    notification_settings: Mapping[str, Any] | None = None,
    audit_sink: AuditSink | None = None,
) -> DispatchOutcome | None:
    """Convenience function to send one notification with default settings.

    Returns:
        The dispatch outcome (see ``WebhookModule.send_notification``).
    """
    module = WebhookModule(audit_sink=audit_sink)
    return module.send_notification(notification, module_settings, notification_settings)


__all__ = ["WebhookModule", "as_bool", "as_timeout", "send_notification"]
