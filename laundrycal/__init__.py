"""
laundrycal - bokatvattid laundry bookings as an iCalendar feed.
"""

__version__ = "0.1.0"
