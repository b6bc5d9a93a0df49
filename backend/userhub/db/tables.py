"""Explicit table definitions and row <-> record translators."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import BigInteger, Column, Integer, MetaData, String, Table, UniqueConstraint

from ..domain.user import User

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255

metadata = MetaData()

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_id_type = BigInteger().with_variant(Integer(), "sqlite")

users = Table(
    "users",
    metadata,
    Column("id", _id_type, primary_key=True, autoincrement=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
    Column("email", String(EMAIL_MAX_LENGTH), nullable=False),
    UniqueConstraint("email", name="uq_users_email"),
)


def row_to_user(row: Mapping[str, Any]) -> User:
    return User(id=row["id"], name=row["name"], email=row["email"])


def user_to_row(user: User) -> dict[str, Any]:
    # id is always assigned by the database
    return {"name": user.name, "email": user.email}
