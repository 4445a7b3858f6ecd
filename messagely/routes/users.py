from fastapi import APIRouter, Depends

from ..messages import MessageStore
from ..schemas import (
    ReceivedMessageListResponse,
    SentMessageListResponse,
    UserDetailResponse,
    UserListResponse,
)
from ..users import UserStore
from .deps import ensure_correct_user, get_current_username, get_message_store, get_user_store

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(
    _username: str = Depends(get_current_username),
    users: UserStore = Depends(get_user_store),
):
    return {"users": users.all()}


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(
    username: str = Depends(ensure_correct_user),
    users: UserStore = Depends(get_user_store),
):
    return {"user": users.get(username)}


@router.get("/{username}/to", response_model=ReceivedMessageListResponse)
def messages_to_user(
    username: str = Depends(ensure_correct_user),
    users: UserStore = Depends(get_user_store),
    messages: MessageStore = Depends(get_message_store),
):
    users.get(username)
    return {"messages": messages.messages_to(username)}


@router.get("/{username}/from", response_model=SentMessageListResponse)
def messages_from_user(
    username: str = Depends(ensure_correct_user),
    users: UserStore = Depends(get_user_store),
    messages: MessageStore = Depends(get_message_store),
):
    users.get(username)
    return {"messages": messages.messages_from(username)}
