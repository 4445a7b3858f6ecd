from typing import Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
import jwt

from ..auth import decode_access_token
from ..config import Settings, get_settings
from ..db import get_db
from ..messages import MessageStore
from ..users import UserStore


def get_user_store(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> UserStore:
    return UserStore(db, settings)


def get_message_store(db: Session = Depends(get_db)) -> MessageStore:
    return MessageStore(db)


def get_current_username(
    settings: Settings = Depends(get_settings),
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    token = authorization.split(" ", 1)[1].strip()
    try:
        return decode_access_token(token, settings)
    except jwt.InvalidTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc


def ensure_correct_user(username: str, current_username: str = Depends(get_current_username)) -> str:
    """Only the user named in the path may access it."""
    if username != current_username:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return current_username
