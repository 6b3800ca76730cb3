"""Service entry point — FastAPI trigger adapter around the TransitionNotifier."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from moderation_notify.config import load_settings
from moderation_notify.errors import NotificationDeliveryFailure
from moderation_notify.logging import configure_logging
from moderation_notify.notifications import DiscordWebhookClient, TransitionNotifier
from moderation_notify.routes import health, triggers

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings once, wire the notifier and close the webhook client on shutdown."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    webhook = DiscordWebhookClient(settings.discord)
    app.state.settings = settings
    app.state.webhook = webhook
    app.state.notifier = TransitionNotifier(settings.site.url, webhook)
    logger.info(
        "Notifier ready — env=%s site=%s trigger_auth=%s",
        settings.app.env,
        settings.site.url,
        settings.trigger.auth_enabled,
    )

    yield

    await webhook.close()
    logger.info("Notifier shutdown complete")


async def _delivery_failure_handler(_: Request, exc: Exception) -> JSONResponse:
    """Report a failed delivery as 502 so the trigger runtime marks the invocation failed."""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(title="moderation-notify", lifespan=lifespan)
    app.add_exception_handler(NotificationDeliveryFailure, _delivery_failure_handler)
    app.include_router(health.router)
    app.include_router(triggers.router)
    return app


def main() -> None:
    """Run the trigger adapter with uvicorn."""
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
