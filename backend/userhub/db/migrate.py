"""Explicit, idempotent schema migration and conflict-tolerant seeding."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from loguru import logger
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import insert
from sqlalchemy import exc as sa_exc
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine

from ..api.users.schemas import UserCreateIn
from ..domain.user import User
from ..errors import ValidationError
from ..services.user_service import validation_details
from .tables import metadata, user_to_row, users

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def migrate(engine: Engine) -> None:
    """Create missing tables; existing tables are left untouched."""
    metadata.create_all(engine, checkfirst=True)
    logger.info("Schema is up to date ({})", ", ".join(sorted(metadata.tables)))


def _insert_ignoring_conflicts(conn: Connection, row: dict) -> int:
    dialect_insert = _UPSERT_INSERTS.get(conn.dialect.name)
    if dialect_insert is not None:
        stmt = dialect_insert(users).values(**row).on_conflict_do_nothing(index_elements=["email"])
        return conn.execute(stmt).rowcount
    try:
        with conn.begin_nested():
            conn.execute(insert(users).values(**row))
    except sa_exc.IntegrityError:
        return 0
    return 1


def seed(engine: Engine, seed_users: Iterable[User]) -> int:
    """Insert seed users, skipping any whose email already exists.

    Returns the number of rows actually inserted.
    """
    inserted = 0
    with engine.begin() as conn:
        for user in seed_users:
            inserted += _insert_ignoring_conflicts(conn, user_to_row(user))
    logger.info("Seeded {} user(s)", inserted)
    return inserted


def load_seed_file(path: str | Path) -> List[User]:
    """Read a JSON array of {name, email} objects, validating each entry."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValidationError(f"seed file {path} must contain a JSON array")
    out: List[User] = []
    for i, item in enumerate(raw):
        try:
            UserCreateIn.model_validate(item)
        except PydanticValidationError as e:
            raise ValidationError(f"invalid seed entry #{i}", details=validation_details(e)) from e
        out.append(User(name=item["name"], email=item["email"]))
    return out
