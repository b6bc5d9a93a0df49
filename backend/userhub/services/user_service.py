"""User service: validates candidates before they reach the store."""
from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from ..api.users.schemas import UserCreateIn
from ..db.repositories.user_repo import UserStore
from ..domain.user import User
from ..errors import ValidationError


def validation_details(err: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {"field": ".".join(str(p) for p in e["loc"]) or "body", "message": e["msg"]}
        for e in err.errors()
    ]


class UserService:
    def __init__(self, store: UserStore) -> None:
        self.store = store

    def list_users(self) -> List[User]:
        return self.store.list_all()

    def create_user(self, candidate: User) -> User:
        try:
            UserCreateIn.model_validate({"name": candidate.name, "email": candidate.email})
        except PydanticValidationError as e:
            raise ValidationError("invalid user", details=validation_details(e)) from e
        # EmailStr normalizes the address; persist exactly what was submitted
        return self.store.create(User(name=candidate.name, email=candidate.email))
