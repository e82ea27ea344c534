"""Shared fixtures: a throwaway SQLite database and row factories."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "forum_moderation_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from forum.config import get_settings  # noqa: E402

get_settings.cache_clear()

from forum.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from forum.infrastructure import models  # noqa: E402,F401
from forum.infrastructure.models import ThreadModel, ThreadResponseModel, UserModel  # noqa: E402
from forum.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Insert a user and return its id."""

    def _make_user(handle: str, *, name: str | None = None, role: str = "member") -> int:
        user = UserModel(name=name or handle.title(), handle=handle.lower(), role=role)
        session.add(user)
        session.flush()
        new_id = user.id
        session.commit()
        return new_id

    return _make_user


@pytest.fixture()
def make_thread(session):
    def _make_thread(title: str = "Weekend meetup") -> int:
        thread = ThreadModel(title=title)
        session.add(thread)
        session.flush()
        new_id = thread.id
        session.commit()
        return new_id

    return _make_thread


@pytest.fixture()
def make_response(session):
    def _make_response(thread_id: int, body: str = "I'll bring snacks") -> int:
        response = ThreadResponseModel(thread_id=thread_id, body=body)
        session.add(response)
        session.flush()
        new_id = response.id
        session.commit()
        return new_id

    return _make_response


@pytest.fixture()
def auth_headers():
    """Return a factory building bearer headers for a user id."""

    def _auth_headers(user_id: int) -> dict[str, str]:
        token = create_access_token({"sub": str(user_id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
