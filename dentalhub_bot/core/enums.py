"""Centralized enum definitions for DentalHub-Bot."""

from enum import Enum


class Sex(str, Enum):
    """Patient sex as offered by the booking form."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def values(cls) -> list:
        """Return list of all enum values."""
        return [e.value for e in cls]

    @property
    def label(self) -> str:
        """Option text shown in the sex dropdown."""
        return self.value.capitalize()


class PatientType(str, Enum):
    """New or existing patient."""
    NEW = "new"
    EXISTING = "existing"


class InsuranceType(str, Enum):
    """Insurance type button values (exact case)."""
    PRIVATE = "Private"
    NHS = "NHS"

    @classmethod
    def values(cls) -> list:
        """Return list of all enum values."""
        return [e.value for e in cls]


class WeekNavigation(str, Enum):
    """Operator choices when browsing the availability calendar."""
    PREVIOUS = "previous"
    NEXT = "next"
    SKIP = "skip"


class BookingState(str, Enum):
    """States of the booking controller."""
    BOOTSTRAP = "bootstrap"
    INTAKE = "intake"
    SELECTOR_PIPELINE = "selector_pipeline"
    SLOT_SEARCH = "slot_search"
    SLOT_PREVIEW = "slot_preview"
    BOOKING = "booking"
    VERIFICATION = "verification"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether the controller stops in this state."""
        return self in (BookingState.DONE, BookingState.FAILED)
