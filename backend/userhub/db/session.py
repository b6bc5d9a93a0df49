"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from typing import Any

from flask import Flask
from sqlalchemy import create_engine, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool


def engine_options(url: str, *, echo: bool, pool_size: int, max_overflow: int, pool_timeout: float) -> dict[str, Any]:
    opts: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        opts["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            opts["poolclass"] = StaticPool
            return opts
    opts.update(pool_size=pool_size, max_overflow=max_overflow, pool_timeout=pool_timeout)
    return opts


class Database:
    def __init__(self) -> None:
        self.engine: Engine | None = None
        self.Session = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        opts = engine_options(
            url,
            echo=app.config.get("SQL_ECHO", False),
            pool_size=app.config.get("POOL_SIZE", 10),
            max_overflow=app.config.get("MAX_OVERFLOW", 20),
            pool_timeout=app.config.get("POOL_TIMEOUT", 30),
        )

        if self.engine is not None:
            self.engine.dispose()
        self.engine = create_engine(url, **opts)
        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False)
        )

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()


db = Database()
