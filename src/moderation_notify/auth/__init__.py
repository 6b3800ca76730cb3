"""Authentication for inbound trigger requests."""

from moderation_notify.auth.middleware import TRIGGER_SECRET_HEADER, require_trigger_secret

__all__ = ["TRIGGER_SECRET_HEADER", "require_trigger_secret"]
