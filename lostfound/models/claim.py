from enum import Enum
from typing import Optional
import uuid
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class ClaimStatus(str, Enum):
    pending = "Pending"
    resolved = "Resolved"


class Claim(SQLModel, table=True):
    __tablename__ = "claims"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Claimed item, claims go away with it
    item_id: str = Field(foreign_key="found_items.id", index=True, ondelete="CASCADE")

    # Claimant
    claimer_name: str = Field(max_length=100)
    claimer_email: str = Field(max_length=100)
    claimed_by: Optional[str] = Field(default=None, index=True)  # weak user reference

    # Content
    last_seen_building: str = Field(max_length=100)
    last_seen_room: Optional[str] = Field(default=None, max_length=50)
    ownership_details: str
    claim_date: datetime  # when the claimant believes it was lost
    date_submitted: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    status: ClaimStatus = Field(default=ClaimStatus.pending, index=True)
    resolved_date: Optional[datetime] = None
    resolved_by: Optional[str] = Field(default=None, index=True)  # weak user reference

    # Soft delete
    deleted_at: Optional[datetime] = Field(default=None, index=True)
