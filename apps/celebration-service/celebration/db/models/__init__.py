"""
SQLAlchemy models for the celebration tables.

Exposes `Base`, `now_utc`, and the three independent ORM classes.
"""

from .base import Base, now_utc  # re-export

from .photos import Photo
from .videos import Video
from .guestbook import GuestbookMessage

__all__ = [
    # base
    "Base",
    "now_utc",
    # records
    "Photo",
    "Video",
    "GuestbookMessage",
]
