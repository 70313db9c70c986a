from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from celebration.db import models, schemas
from celebration.db.repositories import guestbook as repo_guestbook
from celebration.db.repositories import photos as repo_photos
from celebration.db.repositories import videos as repo_videos


def test_photo_repository_roundtrip(db_session):
    created = repo_photos.upload_photo(db_session, schemas.UploadPhotoInput(
        filename="a.jpg", original_name="A", file_path="https://example.com/media/a.jpg", uploaded_by="Alice",
    ))
    assert created.id is not None
    assert created.uploaded_at is not None

    listed = repo_photos.get_photos(db_session)
    assert [p.id for p in listed] == [created.id]


def test_video_repository_normalises_empty_thumbnail(db_session):
    # model_construct skips validation, the repository still stores NULL
    payload = schemas.AddVideoInput.model_construct(
        title="Clip", video_url="https://example.com/clip.mp4", thumbnail_url="", uploaded_by="Bob",
    )
    created = repo_videos.add_video(db_session, payload)
    assert created.thumbnail_url is None


def test_guestbook_repository_pagination(db_session):
    for i in range(3):
        repo_guestbook.create_guestbook_message(
            db_session, schemas.CreateGuestbookMessageInput(author_name=f"G{i}", message="hi")
        )
    page = repo_guestbook.get_guestbook_messages(db_session, schemas.PaginationParams(limit=1, offset=1))
    assert [m.author_name for m in page] == ["G1"]
    assert repo_guestbook.get_guestbook_messages(db_session, schemas.PaginationParams(offset=5)) == []


def test_equal_timestamps_fall_back_to_id_order(db_session):
    ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    for name in ("one", "two", "three"):
        db_session.add(models.Photo(
            filename=f"{name}.jpg", original_name=name, file_path=f"https://example.com/{name}.jpg",
            uploaded_by="seed", uploaded_at=ts,
        ))
        db_session.commit()
    names = [p.original_name for p in repo_photos.get_photos(db_session)]
    assert names == ["three", "two", "one"]


@pytest.mark.parametrize(
    "call",
    [
        lambda db: repo_photos.upload_photo(db, schemas.UploadPhotoInput(
            filename="a.jpg", original_name="A", file_path="https://example.com/a.jpg", uploaded_by="Alice")),
        lambda db: repo_videos.add_video(db, schemas.AddVideoInput(
            title="Clip", video_url="https://example.com/c.mp4", uploaded_by="Bob")),
        lambda db: repo_guestbook.create_guestbook_message(db, schemas.CreateGuestbookMessageInput(
            author_name="Ann", message="hi")),
    ],
)
def test_insert_failure_rolls_back_and_reraises(call):
    db = MagicMock()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("constraint"))
    with pytest.raises(IntegrityError):
        call(db)
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


def test_select_failure_propagates():
    db = MagicMock()
    query = db.query.return_value.order_by.return_value
    query.all.side_effect = OperationalError("SELECT", {}, Exception("gone"))
    with pytest.raises(OperationalError):
        repo_videos.get_videos(db)
