from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from lostfound.crud import claims as claims_crud
from lostfound.db.db import get_session
from lostfound.models.user import User
from lostfound.schemas.claim_schemas import ClaimCreateRequest, ClaimDetail, ClaimRead, ClaimResolveRequest
from lostfound.utils.auth_helper import require_admin

router = APIRouter()


@router.get("", response_model=List[ClaimRead])
def get_claims(session: Session = Depends(get_session)):
    return claims_crud.list_claims(session)


@router.get("/pending", response_model=List[ClaimRead])
def get_pending_claims(session: Session = Depends(get_session)):
    return claims_crud.list_pending_claims(session)


@router.get("/archive", response_model=List[ClaimRead])
def get_claim_archive(
    include_deleted: bool = False,
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    """
    Resolved claims for the admin archive. With `include_deleted` the
    soft-deleted claims are listed as well.
    """
    return claims_crud.list_archived_claims(session, include_deleted=include_deleted)


@router.get("/{claim_id}", response_model=ClaimDetail)
def get_claim(claim_id: str, session: Session = Depends(get_session)):
    return claims_crud.get_claim_detail(session, claim_id)


@router.post("", response_model=ClaimDetail, status_code=201)
def create_claim(payload: ClaimCreateRequest, session: Session = Depends(get_session)):
    claim = claims_crud.create_claim(session, payload)
    return claims_crud.get_claim_detail(session, claim.id)


@router.put("/{claim_id}/resolve", status_code=204)
def resolve_claim(
    claim_id: str,
    payload: ClaimResolveRequest,
    session: Session = Depends(get_session),
):
    claims_crud.resolve_claim(session, claim_id, payload.resolved_by)
    return Response(status_code=204)


@router.delete("/{claim_id}", status_code=204)
def delete_claim(claim_id: str, session: Session = Depends(get_session)):
    claims_crud.soft_delete_claim(session, claim_id)
    return Response(status_code=204)
