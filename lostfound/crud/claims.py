"""
Claim lifecycle.

A claim starts Pending and can only move to Resolved through `resolve_claim`.
Soft deletion is a separate axis: it stamps `deleted_at` and hides the claim
from every default query, but leaves the row and its status in place. Only a
hard delete of the parent item removes claim rows (see `crud.items`).
"""
import logging
from datetime import datetime, timezone
from sqlmodel import Session, select

from lostfound.models.claim import Claim, ClaimStatus
from lostfound.models.found_item import FoundItem
from lostfound.schemas.claim_schemas import ClaimCreateRequest, ClaimDetail, ClaimRead
from lostfound.schemas.item_schemas import FoundItemRead
from lostfound.schemas.user_schemas import UserSummary
from lostfound.utils.auth_helper import get_weak_user
from lostfound.utils.email_gate import require_institutional_email
from lostfound.utils.errors import Conflict, NotFound, ValidationFailed

logger = logging.getLogger(__name__)


def visible_claims():
    """Default scope: claims that have not been soft-deleted."""
    return select(Claim).where(Claim.deleted_at.is_(None))


def _claims_with_items(include_deleted: bool = False):
    query = select(Claim, FoundItem).join(FoundItem, Claim.item_id == FoundItem.id)

    if not include_deleted:
        query = query.where(Claim.deleted_at.is_(None))

    return query


def _populate(session: Session, query):
    return [
        ClaimRead(**claim.model_dump(), item=FoundItemRead.model_validate(item))
        for claim, item in session.exec(query).all()
    ]


def _get_visible_claim(session: Session, claim_id: str) -> Claim:
    claim = session.exec(visible_claims().where(Claim.id == claim_id)).first()

    if not claim:
        raise NotFound("Claim not found")

    return claim


def list_claims(session: Session):
    return _populate(session, _claims_with_items().order_by(Claim.date_submitted.desc()))


def list_pending_claims(session: Session):
    query = (
        _claims_with_items()
        .where(Claim.status == ClaimStatus.pending)
        .order_by(Claim.date_submitted.desc())
    )

    return _populate(session, query)


def list_archived_claims(session: Session, include_deleted: bool = False):
    # resolved claims, optionally with soft-deleted rows for auditing
    query = (
        _claims_with_items(include_deleted)
        .where(Claim.status == ClaimStatus.resolved)
        .order_by(Claim.resolved_date.desc())
    )

    return _populate(session, query)


def get_claim_detail(session: Session, claim_id: str) -> ClaimDetail:
    claim = _get_visible_claim(session, claim_id)

    item = session.get(FoundItem, claim.item_id)
    claimant = get_weak_user(session, claim.claimed_by)
    resolver = get_weak_user(session, claim.resolved_by)

    return ClaimDetail(
        **claim.model_dump(),
        item=FoundItemRead.model_validate(item) if item else None,
        claimed_by_user=UserSummary.model_validate(claimant) if claimant else None,
        resolved_by_user=UserSummary.model_validate(resolver) if resolver else None,
    )


def create_claim(session: Session, payload: ClaimCreateRequest) -> Claim:
    item = session.get(FoundItem, payload.item_id)
    if not item:
        raise ValidationFailed("Item not found")

    require_institutional_email(payload.claimer_email)

    # claims are accepted even when the claimant account is unknown
    if payload.claimed_by and not get_weak_user(session, payload.claimed_by):
        logger.warning("Claim on item %s by unknown user %s, keeping reference", item.id, payload.claimed_by)

    claim = Claim(
        item_id=item.id,
        claimer_name=payload.claimer_name,
        claimer_email=payload.claimer_email,
        last_seen_building=payload.last_seen_building,
        last_seen_room=payload.last_seen_room,
        ownership_details=payload.ownership_details,
        claim_date=payload.claim_date,
        claimed_by=payload.claimed_by,
        status=ClaimStatus.pending,
    )

    session.add(claim)
    session.commit()
    session.refresh(claim)

    logger.info("Claim %s submitted for item %s", claim.id, item.id)
    return claim


def resolve_claim(session: Session, claim_id: str, resolved_by=None) -> Claim:
    """
    Move a Pending claim to Resolved and stamp who resolved it and when.

    Resolving twice is rejected with Conflict; the first resolution stands.
    """
    claim = _get_visible_claim(session, claim_id)

    if claim.status == ClaimStatus.resolved:
        raise Conflict("Claim is already resolved")

    if resolved_by and not get_weak_user(session, resolved_by):
        logger.warning("Claim %s resolved by unknown user %s", claim.id, resolved_by)

    now = datetime.now(timezone.utc)

    claim.status = ClaimStatus.resolved
    claim.resolved_date = now
    claim.resolved_by = resolved_by or None
    claim.updated_at = now

    session.add(claim)
    session.commit()
    session.refresh(claim)

    logger.info("Claim %s resolved by %s", claim.id, resolved_by)
    return claim


def soft_delete_claim(session: Session, claim_id: str) -> Claim:
    claim = _get_visible_claim(session, claim_id)
    now = datetime.now(timezone.utc)

    claim.deleted_at = now
    claim.updated_at = now

    session.add(claim)
    session.commit()
    session.refresh(claim)

    logger.info("Claim %s soft-deleted", claim.id)
    return claim
