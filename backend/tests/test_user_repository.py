from __future__ import annotations

import pytest

from userhub.db.repositories.user_repo import UserRepository
from userhub.db.session import db
from userhub.domain.user import User
from userhub.errors import ConflictError, UnavailableError


def test_list_all_on_empty_store(repo):
    assert repo.list_all() == []


def test_create_assigns_fresh_id(repo):
    a = repo.create(User(name="Alice", email="alice@example.com"))
    b = repo.create(User(name="Bob", email="bob@example.com"))

    assert a.id is not None
    assert b.id is not None
    assert a.id != b.id


def test_create_ignores_candidate_id(repo):
    created = repo.create(User(id=999, name="Alice", email="alice@example.com"))

    assert created.id != 999


def test_list_all_returns_users_in_insertion_order(repo):
    a = repo.create(User(name="Alice", email="alice@example.com"))
    b = repo.create(User(name="Bob", email="bob@example.com"))

    assert repo.list_all() == [
        User(id=a.id, name="Alice", email="alice@example.com"),
        User(id=b.id, name="Bob", email="bob@example.com"),
    ]


def test_duplicate_email_raises_conflict(repo):
    repo.create(User(name="Alice", email="alice@example.com"))

    with pytest.raises(ConflictError):
        repo.create(User(name="Other Alice", email="alice@example.com"))

    # session is usable again after the rollback
    assert [u.name for u in repo.list_all()] == ["Alice"]


def test_unreachable_database_raises_unavailable(unavailable_app):
    with unavailable_app.app_context():
        repo = UserRepository(db.Session())
        with pytest.raises(UnavailableError):
            repo.list_all()
        with pytest.raises(UnavailableError):
            repo.create(User(name="Alice", email="alice@example.com"))


def test_pool_timeout_raises_unavailable(exhausted_pool_app):
    with exhausted_pool_app.app_context():
        repo = UserRepository(db.Session())
        with pytest.raises(UnavailableError):
            repo.list_all()
