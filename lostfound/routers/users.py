from typing import List
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from lostfound.crud import users as users_crud
from lostfound.db.db import get_session
from lostfound.models.user import User
from lostfound.schemas.user_schemas import AdminLoginRequest, LoginRequest, RegisterRequest, EmailCheckResult, UserRead, UserSummary
from lostfound.utils.auth_helper import require_admin
from lostfound.utils.email_gate import is_institutional_email

router = APIRouter()


@router.post("/register", response_model=UserSummary, status_code=201)
def register_user(payload: RegisterRequest, session: Session = Depends(get_session)):
    return users_crud.register(session, payload.name, payload.email, payload.password)


@router.post("/login", response_model=UserSummary)
def login(payload: LoginRequest, session: Session = Depends(get_session)):
    return users_crud.authenticate(session, payload.email, payload.password)


@router.post("/admin-login", response_model=UserSummary)
def admin_login(payload: AdminLoginRequest, session: Session = Depends(get_session)):
    return users_crud.admin_login(session, payload.password)


@router.get("/validate-email/{email}", response_model=EmailCheckResult)
def validate_email(email: str):
    return EmailCheckResult(email=email, is_valid=is_institutional_email(email))


@router.get("", response_model=List[UserRead])
def get_users(session: Session = Depends(get_session)):
    return users_crud.list_users(session)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, session: Session = Depends(get_session)):
    return users_crud.get_user(session, user_id)


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: str,
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    users_crud.delete_user(session, user_id)
    return Response(status_code=204)
