"""
Credential store: reads and writes against the users table.
"""
from datetime import datetime
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import hash_password, password_context, verify_password
from .config import Settings
from .errors import InvalidCredentials, NotFound, UniqueConstraintViolation, ValidationError
from .models import User

logger = logging.getLogger(__name__)


class UserStore:
    """User registration, authentication and lookup."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.rounds = settings.PASSWORD_HASH_ROUNDS

    def _exists(self, username: str) -> bool:
        return self.db.query(User.username).filter(User.username == username).first() is not None

    def register(self, username: str, password: str, first_name: str, last_name: str, phone: str) -> dict:
        """
        Register a new user.

        Returns:
            {username, password, first_name, last_name, phone}, where password
            is the stored hash

        Raises:
            UniqueConstraintViolation: if the username is taken
            ValidationError: if the row violates any other table constraint
        """
        if self._exists(username):
            raise UniqueConstraintViolation(f"Username already exists: {username}")

        now = datetime.utcnow()
        user = User(
            username=username,
            password=hash_password(password, self.rounds),
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            join_at=now,
            last_login_at=now,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # A concurrent registration may have claimed the username after the check above
            if self._exists(username):
                raise UniqueConstraintViolation(f"Username already exists: {username}") from e
            raise ValidationError("Invalid registration data") from e
        self.db.refresh(user)

        logger.info("Registered user username=%s", user.username)
        return {
            "username": user.username,
            "password": user.password,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "phone": user.phone,
        }

    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Unknown users and wrong passwords fail the same way so callers cannot
        tell which one it was.

        Raises:
            InvalidCredentials: on any mismatch
        """
        row = self.db.query(User.password).filter(User.username == username).first()
        if row is None:
            # Pay the same hashing cost as a wrong password
            password_context(self.rounds).dummy_verify()
            raise InvalidCredentials()
        if not verify_password(password, row.password, self.rounds):
            raise InvalidCredentials()
        return True

    def update_login_timestamp(self, username: str) -> None:
        updated = (
            self.db.query(User)
            .filter(User.username == username)
            .update({User.last_login_at: datetime.utcnow()}, synchronize_session=False)
        )
        if not updated:
            self.db.rollback()
            raise NotFound(f"User Not Found: {username}")
        self.db.commit()

    def all(self) -> list:
        """Basic info on all users: [{username, first_name, last_name, phone}, ...]"""
        users = self.db.query(User).order_by(User.username).all()
        return [user.to_summary() for user in users]

    def get(self, username: str) -> dict:
        user = self.db.query(User).filter(User.username == username).first()
        if user is None:
            raise NotFound(f"User Not Found: {username}")
        return {
            **user.to_summary(),
            "join_at": user.join_at,
            "last_login_at": user.last_login_at,
        }
