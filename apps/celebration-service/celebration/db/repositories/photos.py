"""
Photo repository functions.
"""
from __future__ import annotations

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import models, schemas
from celebration.db.pagination import apply_pagination

logger = logging.getLogger(__name__)


def upload_photo(db: Session, photo: schemas.UploadPhotoInput) -> models.Photo:
    db_photo = models.Photo(
        filename=photo.filename,
        original_name=photo.original_name,
        file_path=photo.file_path,
        uploaded_by=photo.uploaded_by,
    )
    try:
        db.add(db_photo)
        db.commit()
        db.refresh(db_photo)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Photo upload failed for %r", photo.filename)
        raise
    logger.info("photo_uploaded: id=%s uploaded_by=%s", db_photo.id, db_photo.uploaded_by)
    return db_photo


def get_photos(db: Session, pagination: Optional[schemas.PaginationParams] = None) -> List[models.Photo]:
    """List photos, newest first."""
    q = db.query(models.Photo).order_by(models.Photo.uploaded_at.desc(), models.Photo.id.desc())
    q = apply_pagination(q, pagination)
    try:
        return q.all()
    except SQLAlchemyError:
        logger.exception("Get photos failed")
        raise
