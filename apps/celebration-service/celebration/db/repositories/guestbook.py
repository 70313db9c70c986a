"""
Guestbook repository functions.
"""
from __future__ import annotations

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import models, schemas
from celebration.db.pagination import apply_pagination

logger = logging.getLogger(__name__)


def create_guestbook_message(
    db: Session, message: schemas.CreateGuestbookMessageInput
) -> models.GuestbookMessage:
    db_message = models.GuestbookMessage(
        author_name=message.author_name,
        message=message.message,
    )
    try:
        db.add(db_message)
        db.commit()
        db.refresh(db_message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Guestbook message creation failed for author %r", message.author_name)
        raise
    logger.info("guestbook_message_created: id=%s author=%s", db_message.id, db_message.author_name)
    return db_message


def get_guestbook_messages(
    db: Session, pagination: Optional[schemas.PaginationParams] = None
) -> List[models.GuestbookMessage]:
    """List guestbook messages, newest first."""
    q = db.query(models.GuestbookMessage).order_by(
        models.GuestbookMessage.created_at.desc(), models.GuestbookMessage.id.desc()
    )
    q = apply_pagination(q, pagination)
    try:
        return q.all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch guestbook messages")
        raise
