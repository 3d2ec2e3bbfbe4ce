"""
HTTP layer - the calendar feed server.
"""

from .server import create_app

__all__ = ["create_app"]
