"""
HTTP server publishing booking calendars as subscribable iCalendar feeds.
"""

import logging
from typing import Annotated

from fastapi import FastAPI, Path, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from .. import __version__
from ..domain.exceptions import LaundryCalError
from ..services.booking_calendar import BookingCalendarService

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF

CALENDAR_MEDIA_TYPE = "text/calendar"

START_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>laundrycal</title>
</head>
<body>
  <h1>Laundry bookings in your calendar</h1>
  <p>
    Subscribe to your bokatvattid.se bookings by adding the following
    address to your calendar application, using your user id:
  </p>
  <pre>/calendar/&lt;user-id&gt;/calendar.ics</pre>
</body>
</html>
"""


def create_app(service: BookingCalendarService) -> FastAPI:
    """
    Build the FastAPI application around a calendar service.

    Routes:
        GET /                               start page
        GET /calendar/{user_id}/calendar.ics  the user's booking calendar
    """
    app = FastAPI(title="laundrycal", version=__version__)

    @app.exception_handler(LaundryCalError)
    async def handle_laundrycal_error(request: Request, exc: LaundryCalError) -> PlainTextResponse:
        logger.warning("Calendar request %s failed: %s", request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/", response_class=HTMLResponse)
    def start_page() -> str:
        return START_PAGE

    @app.get("/calendar/{user_id}/calendar.ics")
    def calendar(
        user_id: Annotated[int, Path(ge=0, le=UINT32_MAX)],
    ) -> Response:
        body = service.render_calendar(user_id)
        return Response(content=body, media_type=CALENDAR_MEDIA_TYPE)

    return app
