"""Domain models for a single booking run."""

from .availability import AppointmentSummary, AvailabilityGrid, TimeSlot
from .patient import BookingPreferences, PatientProfile

__all__ = [
    "PatientProfile",
    "BookingPreferences",
    "AvailabilityGrid",
    "TimeSlot",
    "AppointmentSummary",
]
