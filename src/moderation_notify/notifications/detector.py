"""Accepted-transition detection — decides whether an event should be announced."""

from __future__ import annotations

from typing import TYPE_CHECKING

from moderation_notify.models.transition import TriggerType
from moderation_notify.notifications.templates import render_message

if TYPE_CHECKING:
    from moderation_notify.models.content import ContentSnapshot
    from moderation_notify.models.transition import TransitionEvent


def should_notify(before: ContentSnapshot | None, after: ContentSnapshot | None) -> bool:
    """Return True on the rising edge into the accepted state.

    An absent ``before`` counts as not accepted, so a document that appears
    already accepted still fires.
    """
    if after is None or not after.is_accepted:
        return False
    return before is None or not before.is_accepted


def evaluate(event: TransitionEvent, site_url: str) -> str | None:
    """Return the message to post for ``event``, or None when nothing should fire."""
    if event.after is None:
        return None
    if event.trigger == TriggerType.UPDATE and not should_notify(event.before, event.after):
        return None
    return render_message(event.kind, event.after, site_url)
