from fastapi import APIRouter, Depends

from ..errors import Forbidden, NotFound
from ..messages import MessageStore
from ..schemas import MessageCreate, MessageDetailResponse, MessageReadResponse, NewMessageResponse
from .deps import get_current_username, get_message_store

router = APIRouter(prefix="/messages", tags=["messages"])


def is_participant(message: dict, username: str) -> bool:
    return username in (message["from_user"]["username"], message["to_user"]["username"])


@router.get("/{message_id}", response_model=MessageDetailResponse)
def get_message(
    message_id: int,
    username: str = Depends(get_current_username),
    messages: MessageStore = Depends(get_message_store),
):
    """Only the sender or the recipient may view a message; anyone else gets a 404."""
    message = messages.get(message_id)
    if not is_participant(message, username):
        raise NotFound(f"No such message: {message_id}")
    return {"message": message}


@router.post("", response_model=NewMessageResponse)
def send_message(
    payload: MessageCreate,
    username: str = Depends(get_current_username),
    messages: MessageStore = Depends(get_message_store),
):
    return {"message": messages.create(username, payload.to_username, payload.body)}


@router.post("/{message_id}/read", response_model=MessageReadResponse)
def mark_read(
    message_id: int,
    username: str = Depends(get_current_username),
    messages: MessageStore = Depends(get_message_store),
):
    """Only the intended recipient may mark a message as read."""
    message = messages.get(message_id)
    if not is_participant(message, username):
        raise NotFound(f"No such message: {message_id}")
    if message["to_user"]["username"] != username:
        raise Forbidden("Cannot set this message to read")
    return {"message": messages.mark_read(message_id)}
