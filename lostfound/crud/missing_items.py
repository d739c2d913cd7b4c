import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlmodel import Session, select

from lostfound.config import ARCHIVE_AFTER_DAYS
from lostfound.models.found_item import FoundItem
from lostfound.models.missing_item import MissingItem
from lostfound.schemas.missing_item_schemas import MissingItemCreateRequest
from lostfound.utils.auth_helper import get_weak_user
from lostfound.utils.email_gate import require_institutional_email
from lostfound.utils.errors import NotFound, ValidationFailed

logger = logging.getLogger(__name__)


def list_active_reports(session: Session):
    return session.exec(
        select(MissingItem)
        .where(MissingItem.archived_at.is_(None))
        .order_by(MissingItem.created_at.desc())
    ).all()


def list_archived_reports(session: Session):
    return session.exec(
        select(MissingItem)
        .where(MissingItem.archived_at.is_not(None))
        .order_by(MissingItem.archived_at.desc())
    ).all()


def get_report(session: Session, report_id: str) -> MissingItem:
    report = session.get(MissingItem, report_id)

    if not report:
        raise NotFound("Missing item report not found")

    return report


def create_report(session: Session, payload: MissingItemCreateRequest) -> MissingItem:
    require_institutional_email(payload.reporter_email)

    if payload.reported_by and not get_weak_user(session, payload.reported_by):
        logger.warning("Missing report by unknown user %s, keeping reference", payload.reported_by)

    report = MissingItem(
        name=payload.name,
        description=payload.description,
        building=payload.building,
        room=payload.room,
        date_lost=payload.date_lost,
        urgent=payload.urgent,
        reporter_name=payload.reporter_name,
        reporter_email=payload.reporter_email,
        reported_by=payload.reported_by,
    )

    session.add(report)
    session.commit()
    session.refresh(report)

    logger.info("Missing item %s reported (%s)", report.id, report.name)
    return report


def mark_found(session: Session, report_id: str, found_item_id: str) -> MissingItem:
    report = get_report(session, report_id)

    if not session.get(FoundItem, found_item_id):
        raise ValidationFailed("Item not found")

    report.is_found = True
    report.found_item_id = found_item_id
    report.updated_at = datetime.now(timezone.utc)

    session.add(report)
    session.commit()
    session.refresh(report)

    logger.info("Missing item %s matched to found item %s", report.id, found_item_id)
    return report


def delete_report(session: Session, report_id: str):
    report = get_report(session, report_id)

    session.delete(report)
    session.commit()

    logger.info("Missing item %s deleted", report_id)


def auto_archive(session: Session, now: Optional[datetime] = None, days: int = ARCHIVE_AFTER_DAYS):
    """
    Archive unmatched missing reports older than `days`.

    Reports that are already archived are not selected again, so running the
    sweep twice archives nothing the second time.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=days)

    stale = session.exec(
        select(MissingItem)
        .where(MissingItem.archived_at.is_(None))
        .where(MissingItem.is_found == False)  # noqa: E712
        .where(MissingItem.created_at < cutoff)
    ).all()

    for report in stale:
        report.archived_at = now
        report.updated_at = now
        session.add(report)

    session.commit()

    archived_ids = [report.id for report in stale]
    logger.info("Auto-archive moved %d missing reports older than %s", len(archived_ids), cutoff.isoformat())

    return archived_ids
