"""
Server-rendered celebration page.

Renders the single page with its three tabs (photos, videos, guestbook) and
accepts the plain HTML form posts behind each tab. Valid submissions redirect
back to the page; invalid ones re-render it with the errors inline.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import schemas
from celebration.db.database import get_db
from celebration.db.repositories import photos as repo_photos
from celebration.db.repositories import videos as repo_videos
from celebration.db.repositories import guestbook as repo_guestbook
from celebration.utils.config import get_config

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["web"], include_in_schema=False)

TABS = ("photos", "videos", "guestbook")


def format_celebration_date(value: Optional[datetime]) -> str:
    """Format timestamps like 'October 5, 2026 at 7:05 PM'."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    return f"{value.strftime('%B')} {value.day}, {value.year} at {hour}:{value.strftime('%M %p')}"


templates.env.filters["celebration_date"] = format_celebration_date


def _validation_messages(exc: ValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages


def _load_lists(db: Session):
    cfg = get_config()
    photos = repo_photos.get_photos(db, schemas.PaginationParams(limit=cfg.photos_page_size, offset=0))
    videos = repo_videos.get_videos(db, schemas.PaginationParams(limit=cfg.videos_page_size, offset=0))
    messages = repo_guestbook.get_guestbook_messages(
        db, schemas.PaginationParams(limit=cfg.guestbook_page_size, offset=0)
    )
    return photos, videos, messages


def _render_page(
    request: Request,
    db: Session,
    *,
    active_tab: str = "photos",
    errors: Optional[Dict[str, List[str]]] = None,
    form_values: Optional[Dict[str, Dict[str, Any]]] = None,
    status_code: int = status.HTTP_200_OK,
    empty_on_storage_error: bool = False,
):
    try:
        photos, videos, messages = _load_lists(db)
    except SQLAlchemyError:
        if not empty_on_storage_error:
            raise
        # Already answering a storage failure; show the form with no lists
        db.rollback()
        photos, videos, messages = [], [], []
    context = {
        "celebrant_name": get_config().celebrant_name,
        "active_tab": active_tab if active_tab in TABS else "photos",
        "photos": [schemas.Photo.model_validate(p) for p in photos],
        "videos": [schemas.Video.model_validate(v) for v in videos],
        "messages": [schemas.GuestbookMessage.model_validate(m) for m in messages],
        "errors": errors or {},
        "form_values": form_values or {},
        "max_message_length": schemas.MAX_MESSAGE_LENGTH,
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


def _redirect_to(tab: str) -> RedirectResponse:
    return RedirectResponse(url=f"/#{tab}", status_code=status.HTTP_303_SEE_OTHER)


def _rerender(request, db, tab, messages, values, status_code):
    logger.info("web_form_rejected: tab=%s status=%s errors=%d", tab, status_code, len(messages))
    return _render_page(
        request, db,
        active_tab=tab,
        errors={tab: messages},
        form_values={tab: values},
        status_code=status_code,
        empty_on_storage_error=status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.get("/")
def celebration_page(request: Request, tab: str = "photos", db: Session = Depends(get_db)):
    return _render_page(request, db, active_tab=tab)


@router.post("/web/photos")
def submit_photo_form(
    request: Request,
    filename: str = Form(default=""),
    original_name: str = Form(default=""),
    file_path: str = Form(default=""),
    uploaded_by: str = Form(default=""),
    db: Session = Depends(get_db),
):
    values = {
        "filename": filename,
        "original_name": original_name,
        "file_path": file_path,
        "uploaded_by": uploaded_by,
    }
    try:
        payload = schemas.UploadPhotoInput(**values)
    except ValidationError as exc:
        return _rerender(request, db, "photos", _validation_messages(exc), values, status.HTTP_422_UNPROCESSABLE_ENTITY)
    try:
        repo_photos.upload_photo(db, payload)
    except SQLAlchemyError:
        return _rerender(request, db, "photos", ["We couldn't save your photo. Please try again."], values, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _redirect_to("photos")


@router.post("/web/videos")
def submit_video_form(
    request: Request,
    title: str = Form(default=""),
    video_url: str = Form(default=""),
    thumbnail_url: str = Form(default=""),
    uploaded_by: str = Form(default=""),
    db: Session = Depends(get_db),
):
    values = {
        "title": title,
        "video_url": video_url,
        "thumbnail_url": thumbnail_url,
        "uploaded_by": uploaded_by,
    }
    try:
        payload = schemas.AddVideoInput(**values)
    except ValidationError as exc:
        return _rerender(request, db, "videos", _validation_messages(exc), values, status.HTTP_422_UNPROCESSABLE_ENTITY)
    try:
        repo_videos.add_video(db, payload)
    except SQLAlchemyError:
        return _rerender(request, db, "videos", ["We couldn't save your video. Please try again."], values, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _redirect_to("videos")


@router.post("/web/guestbook")
def submit_guestbook_form(
    request: Request,
    author_name: str = Form(default=""),
    message: str = Form(default=""),
    db: Session = Depends(get_db),
):
    values = {"author_name": author_name, "message": message}
    try:
        payload = schemas.CreateGuestbookMessageInput(**values)
    except ValidationError as exc:
        return _rerender(request, db, "guestbook", _validation_messages(exc), values, status.HTTP_422_UNPROCESSABLE_ENTITY)
    try:
        repo_guestbook.create_guestbook_message(db, payload)
    except SQLAlchemyError:
        return _rerender(request, db, "guestbook", ["We couldn't save your message. Please try again."], values, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _redirect_to("guestbook")
