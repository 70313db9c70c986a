from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from celebration.api import videos as videos_api
from celebration.db import models


def _payload(**overrides):
    data = {
        "title": "Birthday Wishes from Friends",
        "video_url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "thumbnail_url": "https://example.com/thumb1.jpg",
        "uploaded_by": "user1",
    }
    data.update(overrides)
    return data


def _seed_videos(db_session, count):
    base = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    for i in range(count):
        db_session.add(models.Video(
            title=f"Video {i}",
            video_url=f"https://example.com/video{i}.mp4",
            thumbnail_url=None,
            uploaded_by="seed",
            uploaded_at=base + timedelta(minutes=i),
        ))
    db_session.commit()


def test_add_video_returns_stored_record_with_display_urls(client):
    r = client.post("/videos/", json=_payload())
    assert r.status_code == 201, r.text
    body = r.json()
    assert isinstance(body["id"], int)
    assert body["title"] == "Birthday Wishes from Friends"
    assert body["video_url"] == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert body["thumbnail_url"] == "https://example.com/thumb1.jpg"
    assert body["uploaded_by"] == "user1"
    assert body["uploaded_at"]
    assert body["embed_url"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert body["preview_image_url"] == "https://example.com/thumb1.jpg"


@pytest.mark.parametrize("thumbnail", [None, "", "__omit__"])
def test_add_video_without_thumbnail_stores_null(client, db_session, thumbnail):
    data = _payload(video_url="https://vimeo.com/76979871")
    if thumbnail == "__omit__":
        data.pop("thumbnail_url")
    else:
        data["thumbnail_url"] = thumbnail
    r = client.post("/videos/", json=data)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["thumbnail_url"] is None
    assert body["embed_url"] == "https://player.vimeo.com/video/76979871"

    stored = db_session.query(models.Video).filter(models.Video.id == body["id"]).one()
    assert stored.thumbnail_url is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"video_url": "not-a-url"},
        {"thumbnail_url": "thumb.jpg"},
        {"uploaded_by": ""},
        {"title": "   "},
        {"video_url": "javascript://example.com/%0aalert(document.cookie)"},
        {"thumbnail_url": "javascript:alert(1)"},
    ],
)
def test_add_video_invalid_input(client, db_session, overrides):
    r = client.post("/videos/", json=_payload(**overrides))
    assert r.status_code == 422
    assert db_session.query(models.Video).count() == 0


def test_get_videos_newest_first_and_paginated(client, db_session):
    _seed_videos(db_session, 3)

    r = client.get("/videos/")
    assert r.status_code == 200
    assert [v["title"] for v in r.json()] == ["Video 2", "Video 1", "Video 0"]

    r = client.get("/videos/?limit=1&offset=1")
    assert [v["title"] for v in r.json()] == ["Video 1"]

    r = client.get("/videos/?offset=2")
    assert [v["title"] for v in r.json()] == ["Video 0"]


def test_get_videos_plain_links_have_placeholder_preview(client, db_session):
    _seed_videos(db_session, 1)
    video = client.get("/videos/").json()[0]
    assert video["embed_url"] is None
    assert video["preview_image_url"].startswith("https://via.placeholder.com/")


def test_get_videos_invalid_pagination(client):
    assert client.get("/videos/?limit=0").status_code == 422
    assert client.get("/videos/?offset=-5").status_code == 422


def test_add_video_storage_failure_returns_500(client, monkeypatch):
    def _boom(db, video):
        raise OperationalError("INSERT INTO videos", {}, Exception("disk full"))

    monkeypatch.setattr(videos_api.repo_videos, "add_video", _boom)
    r = client.post("/videos/", json=_payload())
    assert r.status_code == 500
