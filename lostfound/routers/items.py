from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from lostfound.crud import items as items_crud
from lostfound.db.db import get_session
from lostfound.schemas.item_schemas import FoundItemCreateRequest, FoundItemDetail, FoundItemRead

router = APIRouter()


@router.get("", response_model=List[FoundItemRead])
def get_items(session: Session = Depends(get_session)):
    return items_crud.list_items(session)


@router.get("/{item_id}", response_model=FoundItemDetail)
def get_item(item_id: str, session: Session = Depends(get_session)):
    return items_crud.get_item_detail(session, item_id)


@router.post("", response_model=FoundItemRead, status_code=201)
def add_item(payload: FoundItemCreateRequest, session: Session = Depends(get_session)):
    return items_crud.create_item(session, payload)


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: str, session: Session = Depends(get_session)):
    # claims on the item are removed with it
    items_crud.delete_item(session, item_id)
    return Response(status_code=204)
