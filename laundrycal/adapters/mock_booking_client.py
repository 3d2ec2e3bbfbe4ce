"""
Mock booking API client for running without network access.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from ..domain.models import BookingRecord
from .booking_client import parse_my_booking_response

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent / "mock_bookings.json"


class MockBookingClient:
    """
    Mock client that serves a recorded ``getMyBooking`` response.

    The response is loaded from mock_bookings.json and validated exactly
    like a live response, so schema problems surface the same way.
    """

    def __init__(self, data_file: Path | None = None):
        """
        Initialize the mock client.

        Args:
            data_file: Optional path to a recorded API response
        """
        self.data_file = data_file or DEFAULT_DATA_FILE
        self.payload = self._load_payload()

    def _load_payload(self) -> Any:
        """Load the recorded response from disk."""
        with open(self.data_file, "r", encoding="utf-8") as f:
            return json.load(f)

    def get_my_bookings(self, user_id: int) -> List[BookingRecord]:
        """
        Return the recorded bookings, whatever the user id.

        Raises:
            BookingAPIError: If the recorded response is an error or invalid
        """
        logger.debug("Serving mock bookings for user %s from %s", user_id, self.data_file)
        return parse_my_booking_response(self.payload)
