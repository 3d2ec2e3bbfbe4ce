"""
Wire schema of the bokatvattid booking API.

The API answers with an envelope ``{"error", "message", "body",
"api_exec_time"}``. ``getMyBooking`` puts the user's bookings in
``body.data`` with PascalCase keys, ``0``/``1`` integer flags and
``YYYY-MM-DD`` date strings.
"""

from datetime import date
from typing import Any, List, Optional

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal

from ..domain.models import BookingRecord

API_DATE_FORMAT = "YYYY-MM-DD"


def bool_from_int(value: Any) -> bool:
    """Accept only the integers 0 and 1."""
    if isinstance(value, bool) or value not in (0, 1):
        raise ValueError(f"expected zero or one, got {value!r}")
    return bool(value)


def date_from_string(value: Any) -> date:
    """Parse an API date string (``YYYY-MM-DD``)."""
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {value!r}")
    return pendulum.from_format(value, API_DATE_FORMAT).date()


class ApiResponse(BaseModel):
    """Response envelope shared by all API methods."""
    error: int
    message: str = ""
    body: Any = None
    api_exec_time: float = 0.0

    @property
    def failed(self) -> bool:
        return self.error < 0


class Booking(BaseModel):
    """One entry of ``body.data`` in a ``getMyBooking`` response."""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    booking_id: int = Field(alias="BookingID")
    laundry_room_id: int = Field(alias="LaundryRoomID")
    laundry_room: str
    time_slots: int = 0
    time_slots_desc: str
    date_text: str = ""
    image: str = ""
    is_reminder: bool = False
    date_reminder: date
    date_book: date
    date_reminder_text: str = ""
    hour_reminder: str
    is_queue: bool
    number_queue: int = 0
    number_queue_text: str = ""

    @field_validator("is_reminder", "is_queue", mode="before")
    @classmethod
    def validate_flag(cls, value: Any) -> bool:
        return bool_from_int(value)

    @field_validator("date_reminder", "date_book", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> date:
        return date_from_string(value)

    def to_record(self) -> BookingRecord:
        """Convert to the domain booking record."""
        return BookingRecord(
            booking_id=self.booking_id,
            laundry_room=self.laundry_room,
            time_slots_desc=self.time_slots_desc,
            date_book=self.date_book,
            date_reminder=self.date_reminder,
            hour_reminder=self.hour_reminder,
            is_queue=self.is_queue,
            laundry_room_id=self.laundry_room_id,
            is_reminder=self.is_reminder,
            date_text=self.date_text,
            date_reminder_text=self.date_reminder_text,
            number_queue=self.number_queue,
            number_queue_text=self.number_queue_text,
        )


class TimeType(BaseModel):
    """A reminder lead-time option offered by the API."""
    id: int
    name: str
    selected: bool = False

    @field_validator("selected", mode="before")
    @classmethod
    def validate_selected(cls, value: Any) -> bool:
        return bool_from_int(value)


class Reminder(BaseModel):
    """Reminder settings returned alongside the bookings."""
    model_config = ConfigDict(populate_by_name=True)

    time_type: List[TimeType] = Field(default_factory=list, alias="TimeType")


class MyBooking(BaseModel):
    """Body of a ``getMyBooking`` response."""
    data: List[Booking] = Field(default_factory=list)
    total: int = 0
    reminder: Optional[Reminder] = None

    def to_records(self) -> List[BookingRecord]:
        return [booking.to_record() for booking in self.data]
