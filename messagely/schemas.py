from pydantic import BaseModel, Field

from datetime import datetime
from typing import List, Optional


class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)


class UserLogin(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    token: str


class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str


class UserDetail(UserSummary):
    join_at: datetime
    last_login_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    users: List[UserSummary]


class UserDetailResponse(BaseModel):
    user: UserDetail


# Messages
class MessageCreate(BaseModel):
    to_username: str
    body: str = Field(min_length=1)


class SentMessage(BaseModel):
    id: int
    to_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReceivedMessage(BaseModel):
    id: int
    from_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class SentMessageListResponse(BaseModel):
    messages: List[SentMessage]


class ReceivedMessageListResponse(BaseModel):
    messages: List[ReceivedMessage]


class MessageDetail(BaseModel):
    id: int
    from_user: UserSummary
    to_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class MessageDetailResponse(BaseModel):
    message: MessageDetail


class NewMessage(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime


class NewMessageResponse(BaseModel):
    message: NewMessage


class MessageRead(BaseModel):
    id: int
    read_at: datetime


class MessageReadResponse(BaseModel):
    message: MessageRead
