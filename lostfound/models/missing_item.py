from typing import Optional
import uuid
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class MissingItem(SQLModel, table=True):
    __tablename__ = "missing_items"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Reporter info
    reporter_name: str = Field(max_length=100)
    reporter_email: str = Field(max_length=100)
    reported_by: Optional[str] = Field(default=None, index=True)  # weak user reference

    # Item fields
    name: str = Field(max_length=200)
    description: str
    building: str = Field(max_length=100)
    room: Optional[str] = Field(default=None, max_length=50)
    date_lost: Optional[datetime] = None
    urgent: bool = Field(default=False)

    # Matching
    is_found: bool = Field(default=False, index=True)
    found_item_id: Optional[str] = Field(default=None, foreign_key="found_items.id", ondelete="SET NULL")

    archived_at: Optional[datetime] = Field(default=None, index=True)
