"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def database_url_from_env() -> str:
    """Return DATABASE_URL, or compose one from the DB_* connection parameters."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD", "postgres")
    name = os.getenv("DB_NAME", "postgres")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{name}"


@dataclass
class BaseConfig:
    SECRET_KEY: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "change-me"))
    TESTING: bool = False

    # Database
    DATABASE_URL: str = field(default_factory=database_url_from_env)
    SQL_ECHO: bool = field(default_factory=lambda: _env_bool("SQL_ECHO"))
    POOL_SIZE: int = field(default_factory=lambda: int(os.getenv("POOL_SIZE", 10)))
    MAX_OVERFLOW: int = field(default_factory=lambda: int(os.getenv("MAX_OVERFLOW", 20)))
    POOL_TIMEOUT: float = field(default_factory=lambda: float(os.getenv("POOL_TIMEOUT", 30)))
    AUTO_MIGRATE: bool = field(default_factory=lambda: _env_bool("AUTO_MIGRATE"))

    # HTTP
    CORS_ORIGINS: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def cors_origins(self) -> list[str] | str:
        if self.CORS_ORIGINS.strip() == "*":
            return "*"
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
