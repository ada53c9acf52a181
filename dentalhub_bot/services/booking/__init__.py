"""Booking page components.

Public API:
- SelectorPipeline: cookies, patient type, insurance, reason, provider
- SlotSelector: availability extraction, week navigation, slot preview
- BookingFormFiller: consents and patient details form
- OTPVerifier: OTP entry and final confirmation
- field helpers: selector wait with retry, typing, verify-after-write escalation
"""

from .date_field import DATE_WRITE_STRATEGIES, fill_date_field
from .field_interaction import (
    WriteStrategy,
    type_field,
    wait_for_selector_with_retry,
    write_with_escalation,
)
from .form_filler import BookingFormFiller, click_next_when_enabled
from .otp_handler import OTPVerifier
from .selector_pipeline import SelectorPipeline, choose_option_index
from .slot_selector import SlotSelector, build_availability

__all__ = [
    "SelectorPipeline",
    "SlotSelector",
    "BookingFormFiller",
    "OTPVerifier",
    "WriteStrategy",
    "DATE_WRITE_STRATEGIES",
    "wait_for_selector_with_retry",
    "type_field",
    "write_with_escalation",
    "fill_date_field",
    "click_next_when_enabled",
    "choose_option_index",
    "build_availability",
]
