"""Transition detection, message rendering and webhook delivery."""

from moderation_notify.notifications.detector import evaluate, should_notify
from moderation_notify.notifications.discord import DiscordWebhookClient
from moderation_notify.notifications.notifier import TransitionNotifier
from moderation_notify.notifications.templates import render_message

__all__ = [
    "DiscordWebhookClient",
    "TransitionNotifier",
    "evaluate",
    "render_message",
    "should_notify",
]
