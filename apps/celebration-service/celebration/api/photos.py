"""
Photo API endpoints.

Upload (record) a photo and list photos newest first.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from celebration.db import schemas
from celebration.db.database import get_db
from celebration.db.repositories import photos as repo_photos
from celebration.api.deps import get_pagination

router = APIRouter(prefix="/photos", tags=["photos"])


@router.post(
    "/",
    response_model=schemas.Photo,
    status_code=status.HTTP_201_CREATED,
    operation_id="uploadPhoto",
)
def upload_photo_endpoint(
    photo: schemas.UploadPhotoInput,
    db: Session = Depends(get_db),
):
    try:
        return repo_photos.upload_photo(db, photo)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Photo upload failed")


@router.get("/", response_model=List[schemas.Photo], operation_id="getPhotos")
def get_photos_endpoint(
    pagination: schemas.PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    try:
        return repo_photos.get_photos(db, pagination)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch photos")
