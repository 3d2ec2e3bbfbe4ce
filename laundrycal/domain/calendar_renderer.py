"""
Serializes calendar events into an iCalendar (RFC 5545) document.
"""

from typing import Iterable

from icalendar import Alarm as ICalAlarm
from icalendar import Calendar, Event as ICalEvent
from icalendar import vText

from .models import CalendarEvent, format_timestamp

DEFAULT_PRODID = "bokatvattid-api"

ICALENDAR_VERSION = "2.0"


class CalendarRenderer:
    """
    Renders booking events as a VCALENDAR feed.

    Timestamps are written as naive local ``YYYYMMDDTHHMMSS`` values and
    durations as whole hours (``PT1H``, ``-PT25H``). Both are passed through
    as text so icalendar does not normalise them into UTC or day/hour
    durations. Properties keep insertion order.
    """

    def __init__(self, prodid: str = DEFAULT_PRODID):
        self.prodid = prodid

    def render(self, events: Iterable[CalendarEvent]) -> str:
        """Render all events into one calendar document with CRLF line endings."""
        return self.build_calendar(events).to_ical(sorted=False).decode("utf-8")

    def build_calendar(self, events: Iterable[CalendarEvent]) -> Calendar:
        calendar = Calendar()
        calendar.add("version", ICALENDAR_VERSION)
        calendar.add("prodid", self.prodid)

        for event in events:
            calendar.add_component(self._build_event(event))

        return calendar

    def _build_event(self, event: CalendarEvent) -> ICalEvent:
        component = ICalEvent()
        component.add("uid", vText(event.uid))
        component.add("dtstamp", vText(format_timestamp(event.created)))
        component.add("dtstart", vText(format_timestamp(event.start)))
        component.add("summary", vText(event.summary))
        component.add("location", vText(event.location))
        component.add("status", vText(event.status.value))
        component.add("duration", vText(event.duration()))

        if event.alarm is not None:
            alarm = ICalAlarm()
            alarm.add("action", vText(event.alarm.action))
            alarm.add("trigger", vText(event.alarm.trigger()))
            alarm.add("description", vText(event.alarm.description))
            component.add_component(alarm)

        return component
