"""Transition events delivered by the document-store change trigger."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from moderation_notify.models.content import (
    ContentSnapshot,
    HowToSnapshot,
    MapPinSnapshot,
    QuestionSnapshot,
)


class TriggerType(StrEnum):
    UPDATE = "update"
    CREATE = "create"


class DocumentKind(StrEnum):
    """The document collections that produce notifications."""

    PIN = "pin"
    HOWTO = "howto"
    QUESTION = "question"

    @property
    def collection(self) -> str:
        return _COLLECTIONS[self]

    @property
    def trigger(self) -> TriggerType:
        return _TRIGGERS[self]

    @property
    def snapshot_model(self) -> type[ContentSnapshot]:
        return _SNAPSHOT_MODELS[self]

    def parse_snapshot(self, data: dict[str, Any] | None) -> ContentSnapshot | None:
        """Validate a raw document into this kind's snapshot; ``None`` stays absent."""
        if data is None:
            return None
        return self.snapshot_model.model_validate(data)


_COLLECTIONS = {
    DocumentKind.PIN: "v3_mappins",
    DocumentKind.HOWTO: "v3_howtos",
    DocumentKind.QUESTION: "questions_rev20230926",
}

# Questions are published without review, so they are announced on creation.
_TRIGGERS = {
    DocumentKind.PIN: TriggerType.UPDATE,
    DocumentKind.HOWTO: TriggerType.UPDATE,
    DocumentKind.QUESTION: TriggerType.CREATE,
}

_SNAPSHOT_MODELS: dict[DocumentKind, type[ContentSnapshot]] = {
    DocumentKind.PIN: MapPinSnapshot,
    DocumentKind.HOWTO: HowToSnapshot,
    DocumentKind.QUESTION: QuestionSnapshot,
}


class TransitionEvent(BaseModel):
    """A before/after pair (or a single created snapshot) for one document."""

    model_config = ConfigDict(frozen=True)

    kind: DocumentKind
    trigger: TriggerType
    before: ContentSnapshot | None = None
    after: ContentSnapshot | None = None
    document_id: str | None = None

    @model_validator(mode="after")
    def check_created_has_no_before(self) -> TransitionEvent:
        if self.trigger == TriggerType.CREATE and self.before is not None:
            raise ValueError("create events cannot carry a before snapshot")
        return self

    @classmethod
    def updated(
        cls,
        kind: DocumentKind,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
        *,
        document_id: str | None = None,
    ) -> TransitionEvent:
        """Build an update-style event from raw before/after documents."""
        return cls(
            kind=kind,
            trigger=TriggerType.UPDATE,
            before=kind.parse_snapshot(before),
            after=kind.parse_snapshot(after),
            document_id=document_id,
        )

    @classmethod
    def created(
        cls,
        kind: DocumentKind,
        value: dict[str, Any] | None,
        *,
        document_id: str | None = None,
    ) -> TransitionEvent:
        """Build a create-style event; there is never a prior snapshot."""
        return cls(
            kind=kind,
            trigger=TriggerType.CREATE,
            after=kind.parse_snapshot(value),
            document_id=document_id,
        )
