"""
Video repository functions.
"""
from __future__ import annotations

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import models, schemas
from celebration.db.pagination import apply_pagination

logger = logging.getLogger(__name__)


def add_video(db: Session, video: schemas.AddVideoInput) -> models.Video:
    db_video = models.Video(
        title=video.title,
        video_url=video.video_url,
        thumbnail_url=video.thumbnail_url or None,
        uploaded_by=video.uploaded_by,
    )
    try:
        db.add(db_video)
        db.commit()
        db.refresh(db_video)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Video creation failed for %r", video.title)
        raise
    logger.info("video_added: id=%s uploaded_by=%s", db_video.id, db_video.uploaded_by)
    return db_video


def get_videos(db: Session, pagination: Optional[schemas.PaginationParams] = None) -> List[models.Video]:
    """List videos, newest first."""
    q = db.query(models.Video).order_by(models.Video.uploaded_at.desc(), models.Video.id.desc())
    q = apply_pagination(q, pagination)
    try:
        return q.all()
    except SQLAlchemyError:
        logger.exception("Get videos failed")
        raise
