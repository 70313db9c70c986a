"""
Video API endpoints.

Share a video link and list videos newest first. Responses include the
derived embed and preview image URLs used by the page.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import schemas
from celebration.db.database import get_db
from celebration.db.repositories import videos as repo_videos
from celebration.api.deps import get_pagination

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post(
    "/",
    response_model=schemas.Video,
    status_code=status.HTTP_201_CREATED,
    operation_id="addVideo",
)
def add_video_endpoint(
    video: schemas.AddVideoInput,
    db: Session = Depends(get_db),
):
    try:
        return repo_videos.add_video(db, video)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Video creation failed")


@router.get("/", response_model=List[schemas.Video], operation_id="getVideos")
def get_videos_endpoint(
    pagination: schemas.PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    try:
        return repo_videos.get_videos(db, pagination)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch videos")
