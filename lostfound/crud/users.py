import logging
from datetime import datetime, timezone
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from lostfound.config import ADMIN_PASSWORD, INSTITUTION_EMAIL_DOMAIN
from lostfound.models.claim import Claim
from lostfound.models.found_item import FoundItem
from lostfound.models.missing_item import MissingItem
from lostfound.models.user import User, UserType
from lostfound.utils.auth_helper import hash_password, verify_password
from lostfound.utils.email_gate import require_institutional_email
from lostfound.utils.errors import Conflict, NotFound, Unauthorized

logger = logging.getLogger(__name__)

ADMIN_EMAIL = f"admin@{INSTITUTION_EMAIL_DOMAIN}"


def get_user_by_email(session: Session, email: str):
    # exact match, emails are compared case-sensitively
    return session.exec(select(User).where(User.email == email)).first()


def _insert_user(session: Session, user: User) -> User:
    # the unique email index is the final word when two inserts race
    session.add(user)

    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise Conflict("Email already exists")

    session.refresh(user)
    return user


def register(session: Session, name: str, email: str, password: str) -> User:
    require_institutional_email(email)

    # reserved for the bootstrapped admin account
    if email.strip().lower() == ADMIN_EMAIL.lower():
        raise Conflict("Email is reserved")

    if get_user_by_email(session, email):
        raise Conflict("Email already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        user_type=UserType.student,
    )

    _insert_user(session, user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate(session: Session, email: str, password: str) -> User:
    require_institutional_email(email)

    user = get_user_by_email(session, email)

    if not user or not verify_password(password, user.password_hash):
        raise Unauthorized("Invalid email or password")

    return user


def admin_login(session: Session, password: str) -> User:
    if password != ADMIN_PASSWORD:
        raise Unauthorized("Invalid admin password")

    admin = session.exec(select(User).where(User.user_type == UserType.admin)).first()

    if not admin:
        if get_user_by_email(session, ADMIN_EMAIL):
            logger.error("Admin bootstrap blocked, %s belongs to a non-admin account", ADMIN_EMAIL)
            raise Conflict("Admin email is already in use by another account")

        admin = User(
            name="Admin",
            email=ADMIN_EMAIL,
            password_hash=hash_password(password),
            user_type=UserType.admin,
        )

        _insert_user(session, admin)

        logger.info("Bootstrapped admin account %s", admin.id)

    return admin


def list_users(session: Session):
    return session.exec(select(User).order_by(User.created_at.desc())).all()


def get_user(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)

    if not user:
        raise NotFound("User not found")

    return user


def delete_user(session: Session, user_id: str):
    """
    Remove a user and clear every weak reference that points at it.

    Items, claims and missing reports stay; only the user link is dropped.
    """
    user = get_user(session, user_id)
    now = datetime.now(timezone.utc)

    items = session.exec(select(FoundItem).where(FoundItem.added_by == user.id)).all()
    for item in items:
        item.added_by = None
        item.updated_at = now
        session.add(item)

    # soft-deleted claims keep their audit trail, so they are cleared too
    claims = session.exec(
        select(Claim).where((Claim.claimed_by == user.id) | (Claim.resolved_by == user.id))
    ).all()
    for claim in claims:
        if claim.claimed_by == user.id:
            claim.claimed_by = None
        if claim.resolved_by == user.id:
            claim.resolved_by = None
        claim.updated_at = now
        session.add(claim)

    reports = session.exec(select(MissingItem).where(MissingItem.reported_by == user.id)).all()
    for report in reports:
        report.reported_by = None
        report.updated_at = now
        session.add(report)

    session.delete(user)
    session.commit()

    logger.info(
        "Deleted user %s (cleared %d items, %d claims, %d reports)",
        user_id, len(items), len(claims), len(reports),
    )
