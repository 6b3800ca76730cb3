"""Trigger routes — receive document change events pushed by the document store."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from moderation_notify.auth.middleware import require_trigger_secret
from moderation_notify.models.transition import DocumentKind, TransitionEvent

router = APIRouter(
    prefix="/triggers",
    tags=["triggers"],
    dependencies=[Depends(require_trigger_secret)],
)

logger = logging.getLogger(__name__)


class UpdatePayload(BaseModel):
    """Before/after documents of an update trigger; null means the document did not exist."""

    before: dict[str, Any] | None = None
    after: dict[str, Any] | None = None


class CreatePayload(BaseModel):
    value: dict[str, Any] | None = None


class TriggerResult(BaseModel):
    notified: bool


async def _handle(request: Request, event: TransitionEvent) -> TriggerResult:
    notifier = request.app.state.notifier
    response = await notifier.handle(event)
    return TriggerResult(notified=response is not None)


@router.post("/map-pins/{pin_id}")
async def map_pin_updated(request: Request, pin_id: str, payload: UpdatePayload) -> TriggerResult:
    """Announce a map pin the first time it becomes accepted."""
    event = TransitionEvent.updated(
        DocumentKind.PIN, payload.before, payload.after, document_id=pin_id
    )
    return await _handle(request, event)


@router.post("/howtos/{howto_id}")
async def howto_updated(request: Request, howto_id: str, payload: UpdatePayload) -> TriggerResult:
    """Announce a how-to the first time it becomes accepted."""
    event = TransitionEvent.updated(
        DocumentKind.HOWTO, payload.before, payload.after, document_id=howto_id
    )
    return await _handle(request, event)


@router.post("/questions/{question_id}")
async def question_created(
    request: Request, question_id: str, payload: CreatePayload
) -> TriggerResult:
    """Announce every newly created question."""
    event = TransitionEvent.created(DocumentKind.QUESTION, payload.value, document_id=question_id)
    return await _handle(request, event)
