"""User store: protocol plus the SQLAlchemy-backed repository."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Protocol

from loguru import logger
from sqlalchemy import insert, select
from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from ...domain.user import User
from ...errors import ConflictError, UnavailableError
from ..tables import row_to_user, user_to_row, users

_UNAVAILABLE = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


class UserStore(Protocol):
    def list_all(self) -> List[User]: ...

    def create(self, candidate: User) -> User: ...


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except sa_exc.IntegrityError as e:
            self.session.rollback()
            logger.warning("Unique constraint violated while {}: {}", action, e.orig)
            raise ConflictError("email already exists") from e
        except _UNAVAILABLE as e:
            self.session.rollback()
            logger.warning("Database unavailable while {}: {}", action, e)
            raise UnavailableError("database is unavailable") from e

    def list_all(self) -> List[User]:
        stmt = select(users).order_by(users.c.id)
        with self._storage_errors("listing users"):
            rows = self.session.execute(stmt).mappings().all()
        return [row_to_user(r) for r in rows]

    def create(self, candidate: User) -> User:
        row = user_to_row(candidate)
        with self._storage_errors("creating user"):
            result = self.session.execute(insert(users).values(**row))
            self.session.commit()
        created = User(id=result.inserted_primary_key[0], **row)
        logger.info("Created user id={}", created.id)
        return created

    def ping(self) -> None:
        with self._storage_errors("checking connectivity"):
            self.session.execute(select(1))
