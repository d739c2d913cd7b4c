from datetime import datetime
from pydantic import Field

from lostfound.models.user import UserType
from lostfound.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=1)


class LoginRequest(CamelModel):
    email: str
    password: str


class AdminLoginRequest(CamelModel):
    password: str


class UserSummary(CamelModel):
    id: str
    name: str
    email: str
    user_type: UserType


class UserRead(UserSummary):
    created_at: datetime
    updated_at: datetime


class EmailCheckResult(CamelModel):
    email: str
    is_valid: bool
