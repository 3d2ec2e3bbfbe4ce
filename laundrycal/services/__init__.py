"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .booking_calendar import BookingCalendarService, BookingClientProtocol

__all__ = ["BookingCalendarService", "BookingClientProtocol"]
