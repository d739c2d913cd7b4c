from enum import Enum
import uuid
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class UserType(str, Enum):
    student = "Student"
    admin = "Admin"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    name: str = Field(max_length=100)
    email: str = Field(max_length=100, index=True, unique=True)
    password_hash: str

    user_type: UserType = Field(default=UserType.student, index=True)
