from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from lostfound.schemas.common import CamelModel
from lostfound.schemas.user_schemas import UserSummary


class FoundItemCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    building: str = Field(min_length=1, max_length=100)
    room: Optional[str] = Field(default=None, max_length=50)
    date_found: datetime
    added_by: Optional[str] = None

    @field_validator("room", "added_by")
    @classmethod
    def blank_to_none(cls, value):
        return value or None


class FoundItemRead(CamelModel):
    id: str
    name: str
    description: str
    building: str
    room: Optional[str] = None
    date_found: datetime
    added_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class FoundItemDetail(FoundItemRead):
    added_by_user: Optional[UserSummary] = None
