"""
Pytest configuration for messagely tests.

Points the service at a throwaway SQLite database and a cheap work factor
before the package is imported, and recreates the tables for every test.
"""
import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite:///./test_messagely.db"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["SECRET_KEY"] = "test-secret-key"

# Add parent directory to Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from messagely.config import settings as app_settings
from messagely.db import Base, engine
from messagely.main import app
from messagely.messages import MessageStore
from messagely.users import UserStore


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def settings():
    return app_settings


@pytest.fixture
def db_session():
    session = Session(bind=engine)
    yield session
    session.close()


@pytest.fixture
def user_store(db_session, settings):
    return UserStore(db_session, settings)


@pytest.fixture
def message_store(db_session):
    return MessageStore(db_session)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def register(client, username, password="secret123", **extra):
    """Register through the API and return the token."""
    data = {
        "username": username,
        "password": password,
        "first_name": extra.get("first_name", username.title()),
        "last_name": extra.get("last_name", "Tester"),
        "phone": extra.get("phone", "+15550000000"),
    }
    response = client.post("/auth/register", json=data)
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
