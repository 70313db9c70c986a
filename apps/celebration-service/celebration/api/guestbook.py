"""
Guestbook API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import schemas
from celebration.db.database import get_db
from celebration.db.repositories import guestbook as repo_guestbook
from celebration.api.deps import get_pagination

router = APIRouter(prefix="/guestbook", tags=["guestbook"])


@router.post(
    "/messages",
    response_model=schemas.GuestbookMessage,
    status_code=status.HTTP_201_CREATED,
    operation_id="createGuestbookMessage",
)
def create_guestbook_message_endpoint(
    message: schemas.CreateGuestbookMessageInput,
    db: Session = Depends(get_db),
):
    try:
        return repo_guestbook.create_guestbook_message(db, message)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Guestbook message creation failed")


@router.get(
    "/messages",
    response_model=List[schemas.GuestbookMessage],
    operation_id="getGuestbookMessages",
)
def get_guestbook_messages_endpoint(
    pagination: schemas.PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    try:
        return repo_guestbook.get_guestbook_messages(db, pagination)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch guestbook messages")
