"""TransitionNotifier — turns change events into at most one webhook post."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from moderation_notify.notifications.detector import evaluate

if TYPE_CHECKING:
    import httpx

    from moderation_notify.models.transition import TransitionEvent
    from moderation_notify.notifications.discord import DiscordWebhookClient

logger = logging.getLogger(__name__)


class TransitionNotifier:
    """Evaluate transition events and dispatch notifications for accepted content.

    Holds no per-event state: every call to ``handle`` is independent, and a
    ``NotificationDeliveryFailure`` from the webhook propagates unchanged so
    the trigger runtime can mark the invocation failed.
    """

    def __init__(self, site_url: str, webhook: DiscordWebhookClient) -> None:
        self._site_url = site_url
        self._webhook = webhook

    async def handle(self, event: TransitionEvent) -> httpx.Response | None:
        """Notify for ``event`` if it qualifies; return the webhook response or None."""
        message = evaluate(event, self._site_url)
        if message is None:
            logger.debug(
                "No notification — kind=%s trigger=%s document=%s",
                event.kind,
                event.trigger,
                event.document_id,
            )
            return None

        logger.info(
            "Notifying — kind=%s collection=%s document=%s",
            event.kind,
            event.kind.collection,
            event.document_id,
        )
        return await self._webhook.dispatch(message)
