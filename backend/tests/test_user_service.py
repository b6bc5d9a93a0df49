from __future__ import annotations

import pytest

from userhub.domain.user import User
from userhub.errors import ValidationError
from userhub.services.user_service import UserService


@pytest.fixture
def store(recording_store):
    return recording_store


@pytest.fixture
def svc(store):
    return UserService(store)


def test_valid_candidate_reaches_store(svc, store):
    user = svc.create_user(User(name="Charlie", email="charlie@example.com"))

    assert user == User(id=1, name="Charlie", email="charlie@example.com")
    assert store.created == [user]


@pytest.mark.parametrize(
    "name, email, field",
    [
        ("", "charlie@example.com", "name"),
        ("   ", "charlie@example.com", "name"),
        (None, "charlie@example.com", "name"),
        ("Charlie", "not-an-email", "email"),
        ("Charlie", "", "email"),
        ("Charlie", None, "email"),
        ("x" * 101, "charlie@example.com", "name"),
    ],
)
def test_invalid_candidate_is_rejected_without_persisting(svc, store, name, email, field):
    with pytest.raises(ValidationError) as exc_info:
        svc.create_user(User(name=name, email=email))

    assert store.created == []
    assert field in [d["field"] for d in exc_info.value.details]


def test_list_users_delegates_to_store(svc, store):
    svc.create_user(User(name="Alice", email="alice@example.com"))
    svc.create_user(User(name="Bob", email="bob@example.com"))

    assert [u.email for u in svc.list_users()] == ["alice@example.com", "bob@example.com"]


def test_email_reaches_store_exactly_as_submitted(svc, store):
    user = svc.create_user(User(name="Charlie", email="Charlie@EXAMPLE.COM"))

    assert user.email == "Charlie@EXAMPLE.COM"
    assert store.created[0].email == "Charlie@EXAMPLE.COM"
