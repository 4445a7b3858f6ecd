from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Enum, Index
from datetime import datetime
from sqlalchemy.orm import relationship
import uuid

from .db import Base


class User(Base):
    __tablename__ = "users"
    username = Column(String, primary_key=True, index=True)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    join_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    sent_messages = relationship("Message", foreign_keys="Message.from_username", back_populates="from_user")
    received_messages = relationship("Message", foreign_keys="Message.to_username", back_populates="to_user")

    def to_summary(self) -> dict:
        """Public profile fields, as attached to messages and user listings."""
        return {
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
        }


class Message(Base):
    __tablename__ = "messages"
    id = Column(Integer, primary_key=True, index=True)
    from_username = Column(String, ForeignKey("users.username"), nullable=False)
    to_username = Column(String, ForeignKey("users.username"), nullable=False)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    read_at = Column(DateTime, nullable=True)

    from_user = relationship("User", foreign_keys=[from_username], back_populates="sent_messages")
    to_user = relationship("User", foreign_keys=[to_username], back_populates="received_messages")

    __table_args__ = (
        Index("ix_messages_from_username", "from_username"),
        Index("ix_messages_to_username", "to_username"),
    )


class AuthEvent(Base):
    __tablename__ = "auth_events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, nullable=False)
    event_type = Column(
        Enum("register", "login_success", "login_failure", name="auth_event_type"),
        nullable=False
    )
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_auth_events_username_timestamp", "username", "timestamp"),
    )

