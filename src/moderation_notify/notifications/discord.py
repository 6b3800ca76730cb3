"""Discord webhook client — posts one chat message per call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from moderation_notify.errors import DeliveryRejected, DeliveryTransportFailure

if TYPE_CHECKING:
    from moderation_notify.config import DiscordConfig

logger = logging.getLogger(__name__)

_MAX_DETAIL_CHARS = 200


class DiscordWebhookClient:
    """Deliver rendered messages to a Discord-compatible webhook.

    Exactly one POST is issued per ``dispatch``; failures are logged and
    raised to the caller without retry.
    """

    def __init__(self, config: DiscordConfig, *, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

    async def dispatch(self, message: str) -> httpx.Response:
        """POST ``{"content": message}`` to the webhook and return the response."""
        try:
            response = await self._client.post(self._config.webhook_url, json={"content": message})
        except httpx.HTTPError as exc:
            logger.error("Webhook post failed — transport error: %s", exc)
            raise DeliveryTransportFailure(str(exc)) from exc

        if not response.is_success:
            detail = response.text[:_MAX_DETAIL_CHARS]
            logger.error("Webhook post failed — status=%s body=%s", response.status_code, detail)
            raise DeliveryRejected(response.status_code, detail)

        logger.info("Webhook post succeeded — status=%s", response.status_code)
        return response

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
