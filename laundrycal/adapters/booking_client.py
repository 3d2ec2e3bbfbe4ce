"""
HTTP client for the bokatvattid booking API.
"""

import logging
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from ..domain.exceptions import BookingAPIError
from ..domain.models import BookingRecord
from .schemas import ApiResponse, MyBooking

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://prod.bokatvattid.se/api/api2"


def parse_my_booking_response(payload: Any) -> List[BookingRecord]:
    """
    Validate a ``getMyBooking`` response and convert it to booking records.

    Raises:
        BookingAPIError: If the API reported an error or the payload does
            not match the expected schema
    """
    try:
        envelope = ApiResponse.model_validate(payload)
    except ValidationError as e:
        raise BookingAPIError(f"Unexpected response envelope: {e}") from e

    if envelope.failed:
        raise BookingAPIError(envelope.message or f"API error {envelope.error}")

    try:
        body = MyBooking.model_validate(envelope.body)
    except ValidationError as e:
        raise BookingAPIError(f"Unexpected booking data: {e}") from e

    return body.to_records()


class BookingClient:
    """
    Client for the bokatvattid ``api2`` endpoint.

    Only the ``getMyBooking`` method is used. Responses are never cached.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30,
        limit: int = 100,
        lang: int = 0,
    ):
        """
        Initialize the booking API client.

        Args:
            base_url: URL of the ``api2`` endpoint
            timeout: Request timeout in seconds
            limit: Maximum number of bookings to request
            lang: Language code understood by the API
        """
        self.base_url = base_url
        self.timeout = timeout
        self.limit = limit
        self.lang = lang

    def build_query(self, user_id: int) -> Dict[str, str]:
        """Query parameters for a ``getMyBooking`` call."""
        return {
            "method": "getMyBooking",
            "userId": str(user_id),
            "start": "0",
            "limit": str(self.limit),
            "lang": str(self.lang),
        }

    def get_my_bookings(self, user_id: int) -> List[BookingRecord]:
        """
        Fetch all bookings of a user.

        Args:
            user_id: Numeric bokatvattid user id

        Returns:
            Booking records in the order the API returned them

        Raises:
            BookingAPIError: If the request fails or the response is invalid
        """
        logger.debug("Fetching bookings for user %s from %s", user_id, self.base_url)

        try:
            response = requests.get(
                self.base_url,
                params=self.build_query(user_id),
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()

        except requests.exceptions.RequestException as e:
            raise BookingAPIError(f"Failed to fetch bookings: {e}") from e
        except ValueError as e:
            raise BookingAPIError(f"Booking API returned invalid JSON: {e}") from e

        records = parse_my_booking_response(payload)
        logger.info("Fetched %d booking(s) for user %s", len(records), user_id)

        return records
