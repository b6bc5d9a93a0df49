from __future__ import annotations

import pytest

from userhub import create_app
from userhub.config import BaseConfig
from userhub.db.repositories.user_repo import UserRepository
from userhub.db.session import db
from userhub.domain.user import User


class RecordingStore:
    """In-memory store that remembers every create it receives."""

    def __init__(self) -> None:
        self.created: list[User] = []

    def list_all(self) -> list[User]:
        return list(self.created)

    def create(self, candidate: User) -> User:
        user = User(id=len(self.created) + 1, name=candidate.name, email=candidate.email)
        self.created.append(user)
        return user


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def make_app(db_url):
    """Build an app on the test database; keyword overrides go to BaseConfig."""

    def _make(store_factory=None, **overrides):
        opts = dict(DATABASE_URL=db_url, TESTING=True, AUTO_MIGRATE=True, LOG_LEVEL="WARNING", CORS_ORIGINS="*")
        opts.update(overrides)
        return create_app(BaseConfig(**opts), store_factory=store_factory)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repo(app):
    with app.app_context():
        yield UserRepository(db.Session())


@pytest.fixture
def unavailable_app(make_app, tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'nested' / 'users.db'}"
    return make_app(DATABASE_URL=url, AUTO_MIGRATE=False)


@pytest.fixture
def exhausted_pool_app(make_app):
    """App whose single pooled connection is checked out for the whole test."""
    app = make_app(POOL_SIZE=1, MAX_OVERFLOW=0, POOL_TIMEOUT=0.2)
    conn = db.engine.connect()
    yield app
    conn.close()
