"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...db.repositories.user_repo import UserRepository
from ...db.session import db
from ...errors import ok


bp = Blueprint("health", __name__)


@bp.get("")
def alive():
    return ok({"status": "ok"})


@bp.get("/db")
def database_status():
    assert db.Session is not None, "DB session is not initialized"
    UserRepository(db.Session()).ping()
    return ok({"status": "ok"})
