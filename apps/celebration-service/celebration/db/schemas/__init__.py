"""
Pydantic schemas for API input and output.

Input models carry the validation rules; output models read straight from
ORM instances (`from_attributes`).
"""

from .common import MAX_PAGINATION_VALUE, PaginationParams, ensure_absolute_url
from .photos import PhotoBase, UploadPhotoInput, Photo
from .videos import VideoBase, AddVideoInput, Video
from .guestbook import (
    MAX_MESSAGE_LENGTH,
    GuestbookMessageBase,
    CreateGuestbookMessageInput,
    GuestbookMessage,
)

__all__ = [
    # Common
    "MAX_PAGINATION_VALUE",
    "PaginationParams",
    "ensure_absolute_url",
    # Photos
    "PhotoBase",
    "UploadPhotoInput",
    "Photo",
    # Videos
    "VideoBase",
    "AddVideoInput",
    "Video",
    # Guestbook
    "MAX_MESSAGE_LENGTH",
    "GuestbookMessageBase",
    "CreateGuestbookMessageInput",
    "GuestbookMessage",
]
