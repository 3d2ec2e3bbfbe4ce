"""
Domain-specific exception hierarchy for the laundry calendar application.
"""

from enum import Enum


class LaundryCalError(Exception):
    """Base class for all application-level errors."""


class ParseErrorKind(Enum):
    """Reasons a booking's schedule fields could not be turned into an event."""

    START_TIME = "Could not parse start time"
    END_TIME = "Could not parse end time"
    DAY = "Could not parse day"
    MONTH = "Could not parse month"
    END_DATE = "Could not construct end date"
    OVERFLOW = "Year overflow"
    ALARM_TIME = "Could not parse alarm time"


class TimeSlotParseError(LaundryCalError):
    """
    Raised when a slot description or reminder time is malformed.

    ``kind`` identifies the failing field so callers can branch on it.
    """

    def __init__(self, kind: ParseErrorKind, value: str = ""):
        self.kind = kind
        self.value = value
        message = kind.value
        if value:
            message = f"{message}: {value!r}"
        super().__init__(message)


class BookingAPIError(LaundryCalError):
    """Raised when booking data cannot be fetched or parsed."""
