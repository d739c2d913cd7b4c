from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from lostfound.schemas.common import CamelModel


class MissingItemCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    building: str = Field(min_length=1, max_length=100)
    room: Optional[str] = Field(default=None, max_length=50)
    date_lost: Optional[datetime] = None
    urgent: bool = False
    reporter_name: str = Field(min_length=1, max_length=100)
    reporter_email: str = Field(min_length=3, max_length=100)
    reported_by: Optional[str] = None

    @field_validator("room", "reported_by")
    @classmethod
    def blank_to_none(cls, value):
        return value or None


class MarkFoundRequest(CamelModel):
    found_item_id: str = Field(min_length=1)


class MissingItemRead(CamelModel):
    id: str
    name: str
    description: str
    building: str
    room: Optional[str] = None
    date_lost: Optional[datetime] = None
    urgent: bool
    reporter_name: str
    reporter_email: str
    reported_by: Optional[str] = None
    is_found: bool
    found_item_id: Optional[str] = None
    archived_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class AutoArchiveResult(CamelModel):
    archived_count: int
    archived_ids: List[str]
