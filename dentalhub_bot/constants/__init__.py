"""Unified constants for DentalHub-Bot.

All classes can be imported directly from this package:
    from dentalhub_bot.constants import Timeouts, Delays, BookingFormSelectors
"""

from .logging import LogEmoji
from .selectors import (
    AvailabilitySelectors,
    BookingFormSelectors,
    CookieSelectors,
    PipelineSelectors,
    SummarySelectors,
)
from .timing import Delays, Retries, Timeouts, TypingDelays

__all__ = [
    # Timing
    "Timeouts",
    "Delays",
    "TypingDelays",
    "Retries",
    # Selectors
    "CookieSelectors",
    "PipelineSelectors",
    "AvailabilitySelectors",
    "SummarySelectors",
    "BookingFormSelectors",
    # Logging
    "LogEmoji",
]
