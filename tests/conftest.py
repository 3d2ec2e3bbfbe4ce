"""
Shared fixtures for laundrycal tests.
"""

from dataclasses import replace
from datetime import date, datetime

import pytest

from laundrycal.domain.models import BookingRecord

EXPECTED_CALENDAR = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "PRODID:bokatvattid-api\r\n"
    "BEGIN:VEVENT\r\n"
    "UID:1\r\n"
    "DTSTAMP:20121111T080000\r\n"
    "DTSTART:20121112T100000\r\n"
    "SUMMARY:Laundry room 1\r\n"
    "LOCATION:Laundry room 1\r\n"
    "STATUS:CONFIRMED\r\n"
    "DURATION:PT1H\r\n"
    "BEGIN:VALARM\r\n"
    "ACTION:DISPLAY\r\n"
    "TRIGGER:-PT25H\r\n"
    "DESCRIPTION:Laundry room 1\r\n"
    "END:VALARM\r\n"
    "END:VEVENT\r\n"
    "END:VCALENDAR\r\n"
)


@pytest.fixture
def booking() -> BookingRecord:
    """A confirmed one-hour booking with a reminder the day before."""
    return BookingRecord(
        booking_id=1,
        laundry_room="Laundry room 1",
        time_slots_desc="10:00 - 11:00",
        date_book=date(2012, 11, 12),
        date_reminder=date(2012, 11, 11),
        hour_reminder="09:00",
        is_queue=False,
        laundry_room_id=1,
        date_reminder_text="Remember your booking!",
    )


@pytest.fixture
def make_booking(booking):
    """Factory returning the default booking with some fields replaced."""
    def _make(**changes) -> BookingRecord:
        return replace(booking, **changes)
    return _make


@pytest.fixture
def now() -> datetime:
    return datetime(2012, 11, 11, 8, 0)


@pytest.fixture
def expected_calendar() -> str:
    """The feed published for the default booking, stamped at ``now``."""
    return EXPECTED_CALENDAR
