"""Logging-related constants."""

from typing import Final


class LogEmoji:
    """Emoji constants for consistent logging."""

    SUCCESS: Final[str] = "✅"
    ERROR: Final[str] = "❌"
    WARNING: Final[str] = "⚠️"
    START: Final[str] = "🚀"
    RETRY: Final[str] = "🔄"
    FOUND: Final[str] = "🎯"
    CALENDAR: Final[str] = "📅"
    KEY: Final[str] = "🔑"
