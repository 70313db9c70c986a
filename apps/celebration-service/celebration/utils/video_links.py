"""
Video link helpers for display.

Derives player embed URLs and preview images from the links guests share.
Only YouTube and Vimeo are recognised; anything else is shown as a plain link.
"""
from __future__ import annotations

import re
from typing import Optional

# Matches watch?v=, /embed/, /v/, /e/, channel-style paths and youtu.be short links
_YOUTUBE_RE = re.compile(
    r"(?:https?://)?(?:www\.)?"
    r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})"
)
_VIMEO_RE = re.compile(r"(?:https?://)?(?:www\.)?vimeo\.com/(\d+)")

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"
VIMEO_EMBED_BASE = "https://player.vimeo.com/video/"
PLACEHOLDER_PREVIEW_URL = "https://via.placeholder.com/480x270/ec4899/ffffff?text=%F0%9F%8E%A5+Video"


def youtube_video_id(url: str | None) -> Optional[str]:
    if not url:
        return None
    match = _YOUTUBE_RE.search(url)
    return match.group(1) if match else None


def vimeo_video_id(url: str | None) -> Optional[str]:
    if not url:
        return None
    match = _VIMEO_RE.search(url)
    return match.group(1) if match else None


def get_embed_url(url: str | None) -> Optional[str]:
    """Return an embeddable player URL, or None when the host is unsupported."""
    yt_id = youtube_video_id(url)
    if yt_id:
        return f"{YOUTUBE_EMBED_BASE}{yt_id}"
    vimeo_id = vimeo_video_id(url)
    if vimeo_id:
        return f"{VIMEO_EMBED_BASE}{vimeo_id}"
    return None


def get_preview_image_url(video_url: str | None, thumbnail_url: str | None = None) -> str:
    """Return the image shown before a video is played.

    Precedence:
    1. the uploader supplied thumbnail
    2. YouTube's max-resolution still for YouTube links
    3. a generic placeholder
    """
    if thumbnail_url:
        return thumbnail_url
    yt_id = youtube_video_id(video_url)
    if yt_id:
        return f"https://img.youtube.com/vi/{yt_id}/maxresdefault.jpg"
    return PLACEHOLDER_PREVIEW_URL
