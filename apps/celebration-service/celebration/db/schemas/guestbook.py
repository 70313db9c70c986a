from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

MAX_MESSAGE_LENGTH = 1000


class GuestbookMessageBase(BaseModel):
    author_name: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)


class CreateGuestbookMessageInput(GuestbookMessageBase):
    # "   " is not a name and "\n" is not a message
    model_config = ConfigDict(str_strip_whitespace=True)


class GuestbookMessage(GuestbookMessageBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
