"""
Adapters layer - External integrations (bokatvattid booking API).
"""

from .booking_client import BookingClient, parse_my_booking_response
from .mock_booking_client import MockBookingClient

__all__ = ["BookingClient", "MockBookingClient", "parse_my_booking_response"]
