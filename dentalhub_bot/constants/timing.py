"""Timing-related constants (timeouts, delays, retries)."""

from typing import Final


class Timeouts:
    """Timeout values - MILLISECONDS for Playwright."""

    PAGE_LOAD: Final[int] = 60_000
    SELECTOR_WAIT: Final[int] = 10_000
    PATIENT_TYPE: Final[int] = 60_000
    INSURANCE: Final[int] = 60_000
    OPTION_LIST: Final[int] = 60_000
    CONTROL_ENABLED: Final[int] = 90_000
    FIELD_VISIBLE: Final[int] = 10_000
    AVAILABILITY_TABLE: Final[int] = 30_000
    WEEK_NAVIGATION: Final[int] = 30_000
    SLOT_CELL: Final[int] = 30_000
    APPOINTMENT_SUMMARY: Final[int] = 30_000
    NEXT_BUTTON: Final[int] = 30_000
    OTP_INPUT: Final[int] = 60_000
    CONFIRMATION_NAVIGATION: Final[int] = 60_000


class Delays:
    """UI interaction delays in SECONDS."""

    SELECTOR_RETRY: Final[float] = 2.0
    AFTER_COOKIES: Final[float] = 1.0
    AFTER_SELECT_OPTION: Final[float] = 2.0
    AFTER_WEEK_NAVIGATION: Final[float] = 2.0
    AFTER_CONSENT: Final[float] = 1.0
    AFTER_CONTINUE_CLICK: Final[float] = 5.0
    AFTER_FIELD: Final[float] = 1.0
    AFTER_OTP: Final[float] = 1.0
    AFTER_DATE_FIELD: Final[float] = 1.0
    AFTER_COMPLETION: Final[float] = 5.0


class TypingDelays:
    """Per-keystroke delays in MILLISECONDS."""

    DEFAULT_KEY: Final[int] = 100
    DATE_SEGMENT_KEY: Final[int] = 150
    DATE_SEPARATOR: Final[int] = 200
    DATE_YEAR_KEY: Final[int] = 250
    DATE_RETYPE_KEY: Final[int] = 300


class Retries:
    """Retry configuration."""

    SELECTOR_WAIT: Final[int] = 3
