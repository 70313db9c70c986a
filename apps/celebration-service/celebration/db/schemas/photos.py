from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import ensure_absolute_url


class PhotoBase(BaseModel):
    filename: str = Field(min_length=1, max_length=255)
    original_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1)
    uploaded_by: str = Field(min_length=1, max_length=100)


class UploadPhotoInput(PhotoBase):
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("file_path")
    @classmethod
    def _file_path_is_absolute(cls, v: str) -> str:
        return ensure_absolute_url(v)


class Photo(PhotoBase):
    id: int
    uploaded_at: datetime
    model_config = ConfigDict(from_attributes=True)
