"""
Message queries: sent/received views joined against users.
"""
from datetime import datetime
import logging

from sqlalchemy.orm import Session, aliased

from .errors import NotFound
from .models import Message, User

logger = logging.getLogger(__name__)


class MessageStore:
    def __init__(self, db: Session):
        self.db = db

    def _require_user(self, username: str) -> None:
        if not self.db.query(User.username).filter(User.username == username).first():
            raise NotFound(f"User Not Found: {username}")

    def create(self, from_username: str, to_username: str, body: str) -> dict:
        """
        Send a message.

        Returns:
            {id, from_username, to_username, body, sent_at}

        Raises:
            NotFound: if the sender or recipient does not exist
        """
        self._require_user(from_username)
        self._require_user(to_username)

        message = Message(
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=datetime.utcnow(),
        )
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)

        logger.info("Message sent id=%s from=%s to=%s", message.id, from_username, to_username)
        return {
            "id": message.id,
            "from_username": message.from_username,
            "to_username": message.to_username,
            "body": message.body,
            "sent_at": message.sent_at,
        }

    def get(self, message_id: int) -> dict:
        """
        Get a message with both parties' profiles.

        Returns:
            {id, body, sent_at, read_at, from_user, to_user}
        """
        message = self.db.query(Message).filter(Message.id == message_id).first()
        if message is None:
            raise NotFound(f"No such message: {message_id}")
        return {
            "id": message.id,
            "body": message.body,
            "sent_at": message.sent_at,
            "read_at": message.read_at,
            "from_user": message.from_user.to_summary(),
            "to_user": message.to_user.to_summary(),
        }

    def mark_read(self, message_id: int) -> dict:
        message = self.db.query(Message).filter(Message.id == message_id).first()
        if message is None:
            raise NotFound(f"No such message: {message_id}")
        message.read_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(message)
        return {"id": message.id, "read_at": message.read_at}

    def messages_from(self, username: str) -> list:
        """
        Messages sent by this user:
            [{id, to_user, body, sent_at, read_at}]
        where to_user is {username, first_name, last_name, phone}
        """
        return self._query(username, outgoing=True)

    def messages_to(self, username: str) -> list:
        """
        Messages sent to this user:
            [{id, from_user, body, sent_at, read_at}]
        where from_user is {username, first_name, last_name, phone}
        """
        return self._query(username, outgoing=False)

    def _query(self, username: str, outgoing: bool) -> list:
        counterpart = aliased(User)
        if outgoing:
            own_column, join_column, key = Message.from_username, Message.to_username, "to_user"
        else:
            own_column, join_column, key = Message.to_username, Message.from_username, "from_user"

        rows = (
            self.db.query(Message, counterpart)
            .join(counterpart, join_column == counterpart.username)
            .filter(own_column == username)
            .order_by(Message.sent_at, Message.id)
            .all()
        )
        return [
            {
                "id": message.id,
                key: other.to_summary(),
                "body": message.body,
                "sent_at": message.sent_at,
                "read_at": message.read_at,
            }
            for message, other in rows
        ]
