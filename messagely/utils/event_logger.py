"""
Event logger utility for authentication events.
"""
from datetime import datetime
from typing import Optional
from fastapi import Request
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import sys
import logging
import os

from ..config import Settings
from ..models import AuthEvent

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
}


def configure_logging(settings: Settings) -> None:
    """Log to stdout, and to LOG_DIR/auth_events.log when LOG_DIR is set."""
    handlers = [logging.StreamHandler(sys.stdout)]

    # Continue with stdout only if the log directory cannot be created
    if settings.LOG_DIR:
        try:
            os.makedirs(settings.LOG_DIR, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(settings.LOG_DIR, "auth_events.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers
    )


def client_ip(request: Request) -> Optional[str]:
    if request.client:
        return request.client.host

    # X-Forwarded-For can contain multiple IPs, take the first one
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return None


def log_auth_event(event_type: str, username: str, request: Request, db: Session) -> None:
    """
    Record an authentication event in the auth_events table.

    Args:
        event_type: One of: register, login_success, login_failure
        username: Username the event concerns
        request: FastAPI Request object
        db: Database session

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    ip_address = client_ip(request)
    timestamp = datetime.utcnow()

    try:
        db.add(AuthEvent(
            username=username,
            event_type=event_type,
            ip_address=ip_address,
            user_agent=request.headers.get("user-agent"),
            timestamp=timestamp,
        ))
        db.commit()
    except SQLAlchemyError as e:
        # Failing to record the event must not break the auth flow
        logger.warning(
            "Failed to log auth event username=%s event_type=%s error=%s",
            username, event_type, e
        )
        db.rollback()
        return

    logger.info(
        "AUTH %s username=%s ip=%s timestamp=%s",
        event_type, username, ip_address, timestamp.isoformat()
    )
