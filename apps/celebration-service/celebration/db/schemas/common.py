from typing import Optional
from urllib.parse import urlparse
from pydantic import BaseModel, Field

# Largest value a BIGINT LIMIT/OFFSET accepts in both SQLite and PostgreSQL
MAX_PAGINATION_VALUE = 2**63 - 1

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


class PaginationParams(BaseModel):
    """Optional limit/offset pair shared by every list operation."""
    limit: Optional[int] = Field(default=None, gt=0, le=MAX_PAGINATION_VALUE)
    offset: Optional[int] = Field(default=None, ge=0, le=MAX_PAGINATION_VALUE)


def ensure_absolute_url(value: str) -> str:
    """Reject values that are not absolute http(s) URLs.

    The links end up in ``href``/``src`` attributes on the shared page, so
    schemes such as ``javascript:`` or ``data:`` are refused. The value is
    returned unchanged otherwise.
    """
    parsed = urlparse(value)
    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL including host")
    return value
