from typing import Optional
import uuid
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class FoundItem(SQLModel, table=True):
    __tablename__ = "found_items"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Logger info, weak reference cleared when the user is removed
    added_by: Optional[str] = Field(default=None, index=True)

    # Item fields
    name: str = Field(max_length=200)
    description: str
    building: str = Field(max_length=100)
    room: Optional[str] = Field(default=None, max_length=50)
    date_found: datetime
