"""Data models for documents and their change events."""

from moderation_notify.models.content import (
    ContentSnapshot,
    HowToSnapshot,
    MapPinSnapshot,
    ModerationStatus,
    QuestionSnapshot,
)
from moderation_notify.models.transition import DocumentKind, TransitionEvent, TriggerType

__all__ = [
    "ContentSnapshot",
    "DocumentKind",
    "HowToSnapshot",
    "MapPinSnapshot",
    "ModerationStatus",
    "QuestionSnapshot",
    "TransitionEvent",
    "TriggerType",
]
