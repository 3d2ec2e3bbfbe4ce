"""
Domain models for bookings, parsed time slots and calendar events.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

EVENT_DT_FORMAT = "%Y%m%dT%H%M%S"

SECONDS_PER_HOUR = 3600


def whole_hours(span: timedelta) -> int:
    """Return the span in whole hours, truncated toward zero."""
    return int(span.total_seconds() / SECONDS_PER_HOUR)


def format_timestamp(value: datetime) -> str:
    """Render a naive timestamp in the compact iCalendar form."""
    return value.strftime(EVENT_DT_FORMAT)


def format_hours(hours: int) -> str:
    """
    Render a signed hour count as an iCalendar duration.

    Examples: 1 -> ``PT1H``, -25 -> ``-PT25H``, 0 -> ``PT0H``.
    """
    sign = "-" if hours < 0 else ""
    return f"{sign}PT{abs(hours)}H"


@dataclass(frozen=True)
class TimeSlotDescription:
    """
    A booking's resolved start timestamp and signed duration.

    The duration is never clamped: a malformed upstream slot can produce a
    zero or negative span.
    """
    start: datetime
    duration: timedelta

    @property
    def end(self) -> datetime:
        return self.start + self.duration

    def duration_hours(self) -> int:
        """Return the duration in whole hours."""
        return whole_hours(self.duration)


@dataclass(frozen=True)
class BookingRecord:
    """
    One booking as delivered by the booking API, already type-coerced.
    """
    booking_id: int
    laundry_room: str
    time_slots_desc: str
    date_book: date
    date_reminder: date
    hour_reminder: str
    is_queue: bool
    laundry_room_id: int = 0
    is_reminder: bool = False
    date_text: str = ""
    date_reminder_text: str = ""
    number_queue: int = 0
    number_queue_text: str = ""


class EventStatus(str, Enum):
    """iCalendar VEVENT status values used for bookings."""
    CONFIRMED = "CONFIRMED"
    TENTATIVE = "TENTATIVE"


@dataclass(frozen=True)
class Alarm:
    """A display reminder fired relative to the start of its event."""
    description: str
    trigger_hours: int
    action: str = "DISPLAY"

    def trigger(self) -> str:
        return format_hours(self.trigger_hours)


@dataclass(frozen=True)
class CalendarEvent:
    """
    A single calendar entry for one booking.

    Summary and location both carry the laundry room name.
    """
    uid: str
    created: datetime
    start: datetime
    summary: str
    location: str
    status: EventStatus
    duration_hours: int
    alarm: Optional[Alarm] = None

    def duration(self) -> str:
        return format_hours(self.duration_hours)
