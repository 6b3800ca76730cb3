"""Forward moderation-state transitions of community content to a chat webhook."""
