"""Core infrastructure module."""

from .enums import BookingState, InsuranceType, PatientType, Sex, WeekNavigation
from .exceptions import (
    BookingError,
    ConfigurationError,
    ControlDisabledError,
    DentalHubBotError,
    FieldInteractionError,
    InteractionError,
    SelectorNotFoundError,
    ValidationError,
)
from .logger import setup_structured_logging

__all__ = [
    # Exceptions
    "DentalHubBotError",
    "ValidationError",
    "InteractionError",
    "SelectorNotFoundError",
    "ControlDisabledError",
    "FieldInteractionError",
    "BookingError",
    "ConfigurationError",
    # Enums
    "BookingState",
    "Sex",
    "PatientType",
    "InsuranceType",
    "WeekNavigation",
    # Logging
    "setup_structured_logging",
]
