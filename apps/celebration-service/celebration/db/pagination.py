"""
Pagination helper shared by the list repositories.
"""
from __future__ import annotations

from typing import Optional
from sqlalchemy.orm import Query

from celebration.db import schemas


def apply_pagination(query: Query, pagination: Optional[schemas.PaginationParams]) -> Query:
    """Apply limit/offset to an already-ordered query.

    Each bound is applied only when supplied, so `limit` alone returns the
    first N rows and `offset` alone skips N rows and returns the rest.
    """
    if pagination is None:
        return query
    if pagination.limit is not None:
        query = query.limit(pagination.limit)
    if pagination.offset is not None:
        query = query.offset(pagination.offset)
    return query
