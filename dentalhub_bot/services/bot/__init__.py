"""Booking run orchestration.

Public API:
- BrowserSession: browser, context and page lifecycle for one run
- BookingFlow: the booking state machine
- BookingContext: data gathered during a run
- run_booking: session + flow + failure screenshot
"""

from .booking_flow import BookingContext, BookingFlow
from .browser_manager import BrowserSession
from .runner import run_booking

__all__ = [
    "BrowserSession",
    "BookingFlow",
    "BookingContext",
    "run_booking",
]
