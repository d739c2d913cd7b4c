import logging
from datetime import datetime, timezone
from sqlmodel import Session, select

from lostfound.models.claim import Claim
from lostfound.models.found_item import FoundItem
from lostfound.models.missing_item import MissingItem
from lostfound.schemas.item_schemas import FoundItemCreateRequest, FoundItemDetail
from lostfound.schemas.user_schemas import UserSummary
from lostfound.utils.auth_helper import get_weak_user
from lostfound.utils.errors import NotFound

logger = logging.getLogger(__name__)


def list_items(session: Session):
    return session.exec(select(FoundItem).order_by(FoundItem.created_at.desc())).all()


def get_item(session: Session, item_id: str) -> FoundItem:
    item = session.get(FoundItem, item_id)

    if not item:
        raise NotFound("Item not found")

    return item


def get_item_detail(session: Session, item_id: str) -> FoundItemDetail:
    item = get_item(session, item_id)
    logger_user = get_weak_user(session, item.added_by)

    return FoundItemDetail(
        **item.model_dump(),
        added_by_user=UserSummary.model_validate(logger_user) if logger_user else None,
    )


def create_item(session: Session, payload: FoundItemCreateRequest) -> FoundItem:
    if payload.added_by and not get_weak_user(session, payload.added_by):
        logger.warning("Found item logged by unknown user %s, keeping reference", payload.added_by)

    item = FoundItem(
        name=payload.name,
        description=payload.description,
        building=payload.building,
        room=payload.room,
        date_found=payload.date_found,
        added_by=payload.added_by,
    )

    session.add(item)
    session.commit()
    session.refresh(item)

    logger.info("Logged found item %s (%s)", item.id, item.name)
    return item


def delete_item(session: Session, item_id: str):
    item = get_item(session, item_id)

    # hard cascade, soft-deleted claims included
    claims = session.exec(select(Claim).where(Claim.item_id == item.id)).all()
    for claim in claims:
        session.delete(claim)

    reports = session.exec(select(MissingItem).where(MissingItem.found_item_id == item.id)).all()
    for report in reports:
        report.found_item_id = None
        report.updated_at = datetime.now(timezone.utc)
        session.add(report)

    # dependents first, the item row goes in a separate flush
    session.flush()

    session.delete(item)
    session.commit()

    logger.info("Deleted found item %s and %d claims", item_id, len(claims))
