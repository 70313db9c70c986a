"""
Shared FastAPI dependencies for API routers.
"""
from typing import Optional
from fastapi import Query

from celebration.db import schemas


def get_pagination(
    limit: Optional[int] = Query(
        default=None, gt=0, le=schemas.MAX_PAGINATION_VALUE, description="Maximum number of items to return"
    ),
    offset: Optional[int] = Query(
        default=None, ge=0, le=schemas.MAX_PAGINATION_VALUE, description="Number of items to skip"
    ),
) -> schemas.PaginationParams:
    """Collect optional limit/offset query parameters into a PaginationParams."""
    return schemas.PaginationParams(limit=limit, offset=offset)
