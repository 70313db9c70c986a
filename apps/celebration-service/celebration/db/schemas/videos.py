from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from celebration.utils.video_links import get_embed_url, get_preview_image_url
from .common import ensure_absolute_url


class VideoBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    video_url: str
    thumbnail_url: Optional[str] = None
    uploaded_by: str = Field(min_length=1, max_length=100)


class AddVideoInput(VideoBase):
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("video_url")
    @classmethod
    def _video_url_is_absolute(cls, v: str) -> str:
        return ensure_absolute_url(v)

    @field_validator("thumbnail_url")
    @classmethod
    def _thumbnail_url_is_absolute(cls, v: Optional[str]) -> Optional[str]:
        # Blank form fields arrive as "" and mean "no thumbnail"
        if v is None or v == "":
            return None
        return ensure_absolute_url(v)


class Video(VideoBase):
    id: int
    uploaded_at: datetime
    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def embed_url(self) -> Optional[str]:
        return get_embed_url(self.video_url)

    @computed_field
    @property
    def preview_image_url(self) -> str:
        return get_preview_image_url(self.video_url, self.thumbnail_url)
