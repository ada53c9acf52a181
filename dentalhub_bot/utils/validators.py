"""Input validation rules for operator-entered booking data."""

import re
from typing import Final

DOB_PATTERN: Final = re.compile(r"^\d{2}/\d{2}/\d{4}$")
PHONE_PATTERN: Final = re.compile(r"^\+?\d{10,12}$")
OTP_PATTERN: Final = re.compile(r"^\d{4}$")
TIME_SLOT_PATTERN: Final = re.compile(r"[0-1]?[0-9]:[0-5][0-9]\s*[ap]m", re.IGNORECASE)


def validate_date_of_birth(value: str) -> bool:
    """Return True for DD/MM/YYYY with two-digit day/month and four-digit year."""
    return bool(DOB_PATTERN.match(value))


def validate_phone(value: str) -> bool:
    """Return True for 10-12 digits with an optional leading '+'."""
    return bool(PHONE_PATTERN.match(value))


def validate_otp(value: str) -> bool:
    """Return True for exactly four digits."""
    return bool(OTP_PATTERN.match(value))


def is_time_slot_text(value: str) -> bool:
    """Return True if the text contains a 12-hour time such as '10:00am'."""
    return bool(TIME_SLOT_PATTERN.search(value))


def normalize_whitespace(value: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends."""
    return re.sub(r"\s+", " ", value).strip()
