"""Utility helpers."""

from .error_capture import ErrorCapture
from .page_helpers import (
    describe_field_state,
    pause,
    read_input_value,
    wait_until_clickable,
    wait_until_enabled,
)
from .validators import (
    is_time_slot_text,
    normalize_whitespace,
    validate_date_of_birth,
    validate_otp,
    validate_phone,
)

__all__ = [
    "ErrorCapture",
    "pause",
    "wait_until_enabled",
    "wait_until_clickable",
    "read_input_value",
    "describe_field_state",
    "validate_date_of_birth",
    "validate_phone",
    "validate_otp",
    "is_time_slot_text",
    "normalize_whitespace",
]
