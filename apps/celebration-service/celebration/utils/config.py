"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:2022",
)


@dataclass(frozen=True)
class ServiceConfig:
    service_name: str
    server_host: str
    server_port: int
    log_level: str
    cors_allowed_origins: Tuple[str, ...]
    celebrant_name: str
    photos_page_size: int
    videos_page_size: int
    guestbook_page_size: int


def _positive_int(value: str | None, default: int) -> int:
    """Parse a positive integer env value, falling back on blanks and junk."""
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _split_origins(value: str | None) -> Tuple[str, ...]:
    if value is None or not value.strip():
        return DEFAULT_CORS_ORIGINS
    return tuple(o.strip().rstrip("/") for o in value.split(",") if o.strip())


@lru_cache(maxsize=None)
def get_config() -> ServiceConfig:
    """Return the cached service configuration."""
    return ServiceConfig(
        service_name=os.getenv("SERVICE_NAME", "celebration-service"),
        server_host=os.getenv("SERVER_HOST", "0.0.0.0"),
        server_port=_positive_int(os.getenv("SERVER_PORT"), 2022),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allowed_origins=_split_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        celebrant_name=os.getenv("CELEBRANT_NAME", "Arishita Nurul Anastasia"),
        photos_page_size=_positive_int(os.getenv("PHOTOS_PAGE_SIZE"), 20),
        videos_page_size=_positive_int(os.getenv("VIDEOS_PAGE_SIZE"), 20),
        guestbook_page_size=_positive_int(os.getenv("GUESTBOOK_PAGE_SIZE"), 50),
    )


def refresh_config_cache() -> None:
    """Invalidate cached configuration (useful for tests)."""
    get_config.cache_clear()
