"""
Tests for iCalendar serialization.
"""

from datetime import datetime

from laundrycal.domain.calendar_renderer import CalendarRenderer
from laundrycal.domain.event_builder import build_events
from laundrycal.domain.models import Alarm, CalendarEvent, EventStatus


def _event(**changes) -> CalendarEvent:
    values = dict(
        uid="7",
        created=datetime(2022, 8, 20, 12, 0),
        start=datetime(2022, 8, 22, 15, 0),
        summary="Room A",
        location="Room A",
        status=EventStatus.CONFIRMED,
        duration_hours=25,
        alarm=Alarm(description="Room A", trigger_hours=-3),
    )
    values.update(changes)
    return CalendarEvent(**values)


class TestCalendarRenderer:
    """Tests for CalendarRenderer."""

    def test_renders_booking_calendar(self, booking, now, expected_calendar):
        """A single booking renders exactly like the published feed."""
        events = build_events([booking], now)

        document = CalendarRenderer().render(events)

        assert document == expected_calendar

    def test_empty_calendar(self):
        document = CalendarRenderer().render([])

        assert document == (
            "BEGIN:VCALENDAR\r\n"
            "VERSION:2.0\r\n"
            "PRODID:bokatvattid-api\r\n"
            "END:VCALENDAR\r\n"
        )

    def test_custom_prodid(self):
        document = CalendarRenderer(prodid="my-feed").render([])

        assert "PRODID:my-feed\r\n" in document

    def test_tentative_event(self):
        document = CalendarRenderer().render([_event(status=EventStatus.TENTATIVE)])

        assert "STATUS:TENTATIVE\r\n" in document

    def test_multi_day_duration_stays_in_hours(self):
        document = CalendarRenderer().render([_event()])

        assert "DURATION:PT25H\r\n" in document
        assert "DTSTART:20220822T150000\r\n" in document
        assert "DTSTAMP:20220820T120000\r\n" in document
        assert "TRIGGER:-PT3H\r\n" in document

    def test_events_keep_order(self):
        events = [_event(uid="2"), _event(uid="1")]

        document = CalendarRenderer().render(events)

        assert document.index("UID:2") < document.index("UID:1")
        assert document.count("BEGIN:VEVENT") == 2
        assert document.count("BEGIN:VALARM") == 2

    def test_text_values_are_escaped(self):
        event = _event(
            summary="Tvättstuga 1, källaren",
            location="Tvättstuga 1, källaren",
        )

        document = CalendarRenderer().render([event])

        assert "SUMMARY:Tvättstuga 1\\, källaren\r\n" in document

    def test_event_without_alarm(self):
        document = CalendarRenderer().render([_event(alarm=None)])

        assert "BEGIN:VALARM" not in document
