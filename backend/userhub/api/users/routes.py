"""Users blueprint (list, create)."""
from __future__ import annotations

from typing import Callable

from flask import Blueprint, request

from ...db.repositories.user_repo import UserStore
from ...domain.user import User
from ...errors import ValidationError, ok
from ...services.user_service import UserService

StoreFactory = Callable[[], UserStore]


def build_blueprint(store_factory: StoreFactory) -> Blueprint:
    """Build the users blueprint around an explicit store factory."""
    bp = Blueprint("users", __name__)

    def _service() -> UserService:
        return UserService(store_factory())

    @bp.get("")
    def list_users():
        return ok([u.to_dict() for u in _service().list_users()])

    @bp.post("")
    def create_user():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("request body must be a JSON object")
        # client-supplied ids are ignored
        candidate = User(name=payload.get("name"), email=payload.get("email"))
        user = _service().create_user(candidate)
        return ok(user.to_dict(), 201)

    return bp
