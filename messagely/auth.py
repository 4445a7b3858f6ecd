from passlib.context import CryptContext
from datetime import datetime, timedelta
from functools import lru_cache
import jwt

from .config import Settings


@lru_cache(maxsize=8)
def password_context(rounds: int) -> CryptContext:
    # pbkdf2_sha256 avoids external bcrypt backend issues in some environments
    return CryptContext(
        schemes=["pbkdf2_sha256"],
        deprecated="auto",
        pbkdf2_sha256__rounds=rounds,
    )


def hash_password(password: str, rounds: int) -> str:
    return password_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str, rounds: int) -> bool:
    return password_context(rounds).verify(plain_password, hashed_password)


def create_access_token(username: str, settings: Settings) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"username": username, "sub": username, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> str:
    """
    Decode a token and return its username claim.

    Raises:
        jwt.InvalidTokenError: if the signature, expiry or claims are invalid
    """
    data = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    username = data.get("username")
    if not username:
        raise jwt.InvalidTokenError("Token has no username claim")
    return username
