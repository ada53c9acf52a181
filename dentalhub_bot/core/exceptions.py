"""Custom exception classes for DentalHub Bot."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class DentalHubBotError(Exception):
    """Base exception for DentalHub Bot."""

    def __init__(
        self, message: str, recoverable: bool = False, details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize DentalHub Bot error.

        Args:
            message: Error message
            recoverable: Whether the error can be recovered locally
            details: Additional error details
        """
        self.message = message
        self.recoverable = recoverable
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "details": self.details,
            "timestamp": self.timestamp,
        }


# Validation Errors
class ValidationError(DentalHubBotError):
    """Operator input failed a field's format rule."""

    def __init__(self, message: str = "Validation error", field: Optional[str] = None):
        """
        Initialize validation error.

        Args:
            message: Corrective message shown to the operator
            field: Field name that failed validation
        """
        self.field = field
        super().__init__(message, recoverable=True, details={"field": field} if field else {})


# Page Interaction Errors
class InteractionError(DentalHubBotError):
    """Base class for failures while driving the remote page."""

    def __init__(
        self,
        message: str = "Page interaction failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, recoverable=False, details=details)


class SelectorNotFoundError(InteractionError):
    """Selector never became visible - website structure may have changed."""

    def __init__(self, selector: str, attempts: int = 1):
        """
        Initialize selector not found error.

        Args:
            selector: Selector that was waited for
            attempts: Number of wait attempts made
        """
        self.selector = selector
        self.attempts = attempts
        super().__init__(
            f"Selector {selector} not found after {attempts} retries",
            details={"selector": selector, "attempts": attempts},
        )


class ControlDisabledError(InteractionError):
    """Control stayed disabled past its wait budget."""

    def __init__(self, selector: str, timeout_ms: int):
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Control {selector} still disabled after {timeout_ms}ms",
            details={"selector": selector, "timeout_ms": timeout_ms},
        )


class FieldInteractionError(InteractionError):
    """Filling a named form field failed."""

    def __init__(self, field_name: str, selector: str, reason: str = ""):
        self.field_name = field_name
        self.selector = selector
        message = f"Failed to fill {field_name} with selector {selector}"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"field": field_name, "selector": selector})


class BookingError(InteractionError):
    """A required booking sub-step failed."""

    def __init__(
        self,
        message: str = "Booking failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


# Configuration Errors
class ConfigurationError(DentalHubBotError):
    """Configuration error occurred."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, recoverable=False, details=details)
