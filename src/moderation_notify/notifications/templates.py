"""Chat message templates for each document kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

from moderation_notify.models.transition import DocumentKind

if TYPE_CHECKING:
    from moderation_notify.models.content import ContentSnapshot

_TEMPLATES = {
    DocumentKind.PIN: "📍 *New {type}* pin from {id}. \n Location here <{site_url}/map/#{id}>",
    DocumentKind.HOWTO: (
        "📓 Yeah! New How To **{title}** by *{author}*\n"
        " check it out: <{site_url}/how-to/{slug}>"
    ),
    DocumentKind.QUESTION: (
        "❓ {author} has a new question: {title}\n"
        "Help them out and answer here: <{site_url}/questions/{slug}>"
    ),
}


def _field(snapshot: ContentSnapshot, name: str) -> str:
    value = getattr(snapshot, name, None)
    return "" if value is None else str(value)


def render_message(kind: DocumentKind, after: ContentSnapshot, site_url: str) -> str:
    """Render the notification text for a document; missing fields render empty."""
    return _TEMPLATES[kind].format(
        site_url=site_url,
        id=_field(after, "id"),
        type=_field(after, "type"),
        title=_field(after, "title"),
        slug=_field(after, "slug"),
        author=_field(after, "created_by"),
    )
