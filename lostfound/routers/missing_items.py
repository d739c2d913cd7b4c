from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from lostfound.crud import missing_items as missing_crud
from lostfound.db.db import get_session
from lostfound.models.user import User
from lostfound.schemas.missing_item_schemas import (
    AutoArchiveResult,
    MarkFoundRequest,
    MissingItemCreateRequest,
    MissingItemRead,
)
from lostfound.utils.auth_helper import require_admin

router = APIRouter()


@router.get("", response_model=List[MissingItemRead])
def get_missing_items(session: Session = Depends(get_session)):
    return missing_crud.list_active_reports(session)


@router.post("", response_model=MissingItemRead, status_code=201)
def report_missing_item(payload: MissingItemCreateRequest, session: Session = Depends(get_session)):
    return missing_crud.create_report(session, payload)


@router.post("/auto-archive", response_model=AutoArchiveResult)
def run_auto_archive(session: Session = Depends(get_session)):
    # triggered by the client on load, safe to call repeatedly
    archived_ids = missing_crud.auto_archive(session)

    return AutoArchiveResult(archived_count=len(archived_ids), archived_ids=archived_ids)


@router.get("/archive", response_model=List[MissingItemRead])
def get_archived_missing_items(
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    return missing_crud.list_archived_reports(session)


@router.get("/{report_id}", response_model=MissingItemRead)
def get_missing_item(report_id: str, session: Session = Depends(get_session)):
    return missing_crud.get_report(session, report_id)


@router.put("/{report_id}/found", response_model=MissingItemRead)
def mark_missing_item_found(
    report_id: str,
    payload: MarkFoundRequest,
    session: Session = Depends(get_session),
):
    return missing_crud.mark_found(session, report_id, payload.found_item_id)


@router.delete("/{report_id}", status_code=204)
def delete_missing_item(report_id: str, session: Session = Depends(get_session)):
    missing_crud.delete_report(session, report_id)
    return Response(status_code=204)
