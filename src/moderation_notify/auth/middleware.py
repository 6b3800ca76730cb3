"""Trigger authentication — verifies the shared secret sent by the change-trigger runtime."""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Request, status

TRIGGER_SECRET_HEADER = "X-Trigger-Secret"


def require_trigger_secret(request: Request) -> None:
    """Raise HTTP 401 unless the request carries the configured trigger secret.

    The check is skipped when no secret is configured.
    """
    config = request.app.state.settings.trigger
    if not config.auth_enabled:
        return
    provided = request.headers.get(TRIGGER_SECRET_HEADER, "")
    if not secrets.compare_digest(provided.encode(), config.shared_secret.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid trigger secret",
        )
