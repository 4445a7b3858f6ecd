"""
Login and registration endpoints issuing signed session tokens.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..auth import create_access_token
from ..config import Settings, get_settings
from ..db import get_db
from ..errors import InvalidCredentials
from ..schemas import Token, UserCreate, UserLogin
from ..users import UserStore
from ..utils.event_logger import log_auth_event
from .deps import get_user_store

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    request: Request,
    users: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
):
    """Make sure to update their last-login!"""
    try:
        users.authenticate(credentials.username, credentials.password)
    except InvalidCredentials:
        log_auth_event("login_failure", credentials.username, request, db)
        raise

    users.update_login_timestamp(credentials.username)
    log_auth_event("login_success", credentials.username, request, db)
    return Token(token=create_access_token(credentials.username, settings))


@router.post("/register", response_model=Token)
def register(
    user: UserCreate,
    request: Request,
    users: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
):
    """Registers, logs in, and returns a token."""
    created = users.register(
        username=user.username,
        password=user.password,
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone,
    )
    users.update_login_timestamp(created["username"])
    log_auth_event("register", created["username"], request, db)
    return Token(token=create_access_token(created["username"], settings))
