import hashlib
import hmac
from typing import Optional
from fastapi import Depends, Header
from sqlmodel import Session

from lostfound.db.db import get_session
from lostfound.models.user import User, UserType
from lostfound.utils.errors import Forbidden, Unauthorized


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    return hmac.compare_digest(hash_password(password), password_hash)


def get_weak_user(session: Session, user_id: Optional[str]) -> Optional[User]:
    # weak references may point at users that never existed or were removed
    if not user_id:
        return None

    return session.get(User, user_id)


def require_admin(
    x_user_id: Optional[str] = Header(default=None),
    session: Session = Depends(get_session),
) -> User:
    if not x_user_id:
        raise Unauthorized("Admin identity required")

    user = session.get(User, x_user_id)

    if not user or user.user_type != UserType.admin:
        raise Forbidden("Admin access required")

    return user
