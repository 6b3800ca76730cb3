"""Exception hierarchy for configuration and notification delivery."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for all moderation-notify errors."""


class ConfigurationError(NotificationError):
    """Required configuration is missing or invalid at startup."""


class NotificationDeliveryFailure(NotificationError):
    """The webhook call for a transition event did not succeed."""


class DeliveryTransportFailure(NotificationDeliveryFailure):
    """The webhook endpoint could not be reached."""


class DeliveryRejected(NotificationDeliveryFailure):
    """The webhook endpoint answered with a non-success status."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"Webhook rejected notification with HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
