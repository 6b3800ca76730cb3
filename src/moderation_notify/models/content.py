"""Document snapshots — read-only views of stored content at one point in time."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModerationStatus(StrEnum):
    """Review state of community content; only ACCEPTED is publicly visible."""

    DRAFT = "draft"
    AWAITING_MODERATION = "awaiting-moderation"
    IMPROVEMENTS_NEEDED = "improvements-needed"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


class ContentSnapshot(BaseModel):
    """Fields shared by every document kind.

    Snapshots are not validated: any field may be missing or hold an
    unexpected type, and unknown fields are kept. Identity fields are
    stringified only when a message is rendered. ``moderation`` becomes a
    ``ModerationStatus`` when it holds a known value; anything else is kept
    as-is and counts as not accepted.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
    created_by: Any = Field(default=None, alias="_createdBy")
    moderation: ModerationStatus | Any = Field(default=None, union_mode="left_to_right")

    @property
    def is_accepted(self) -> bool:
        return self.moderation == ModerationStatus.ACCEPTED


class MapPinSnapshot(ContentSnapshot):
    type: Any = None


class HowToSnapshot(ContentSnapshot):
    title: Any = None
    slug: Any = None


class QuestionSnapshot(ContentSnapshot):
    title: Any = None
    slug: Any = None
