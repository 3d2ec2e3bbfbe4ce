"""
Domain layer - Pure business logic without any I/O.
"""

from .calendar_renderer import CalendarRenderer
from .event_builder import build_event, build_events, iter_event_results
from .exceptions import BookingAPIError, LaundryCalError, ParseErrorKind, TimeSlotParseError
from .models import Alarm, BookingRecord, CalendarEvent, EventStatus, TimeSlotDescription
from .time_slot import parse_time_of_day, parse_time_slot

__all__ = [
    "Alarm",
    "BookingAPIError",
    "BookingRecord",
    "CalendarEvent",
    "CalendarRenderer",
    "EventStatus",
    "LaundryCalError",
    "ParseErrorKind",
    "TimeSlotDescription",
    "TimeSlotParseError",
    "build_event",
    "build_events",
    "iter_event_results",
    "parse_time_of_day",
    "parse_time_slot",
]
