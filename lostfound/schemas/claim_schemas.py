from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from lostfound.models.claim import ClaimStatus
from lostfound.schemas.common import CamelModel
from lostfound.schemas.item_schemas import FoundItemRead
from lostfound.schemas.user_schemas import UserSummary


class ClaimCreateRequest(CamelModel):
    item_id: str = Field(min_length=1)
    claimer_name: str = Field(min_length=1, max_length=100)
    claimer_email: str = Field(min_length=3, max_length=100)
    last_seen_building: str = Field(min_length=1, max_length=100)
    last_seen_room: Optional[str] = Field(default=None, max_length=50)
    ownership_details: str = Field(min_length=1)
    claim_date: datetime
    claimed_by: Optional[str] = None

    @field_validator("last_seen_room", "claimed_by")
    @classmethod
    def blank_to_none(cls, value):
        return value or None


class ClaimResolveRequest(CamelModel):
    resolved_by: Optional[str] = None


class ClaimRead(CamelModel):
    id: str
    item_id: str
    claimer_name: str
    claimer_email: str
    last_seen_building: str
    last_seen_room: Optional[str] = None
    ownership_details: str
    claim_date: datetime
    date_submitted: datetime
    claimed_by: Optional[str] = None
    status: ClaimStatus
    resolved_date: Optional[datetime] = None
    resolved_by: Optional[str] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    item: Optional[FoundItemRead] = None


class ClaimDetail(ClaimRead):
    claimed_by_user: Optional[UserSummary] = None
    resolved_by_user: Optional[UserSummary] = None
