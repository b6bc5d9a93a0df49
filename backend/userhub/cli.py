"""Command line entry point: schema migration and a development server."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from . import create_app
from .config import BaseConfig
from .db.migrate import load_seed_file, migrate, seed
from .db.session import db
from .errors import ServiceError


def cmd_migrate(args: argparse.Namespace) -> int:
    app = create_app(BaseConfig(AUTO_MIGRATE=False))
    with app.app_context():
        assert db.engine is not None
        migrate(db.engine)
        if args.seed:
            users = load_seed_file(args.seed)
            inserted = seed(db.engine, users)
            print(f"Seeded {inserted} of {len(users)} user(s).")
    print("Tables created.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="userhub", description="Users REST service")
    sub = parser.add_subparsers(dest="command", required=True)

    p_migrate = sub.add_parser("migrate", help="create the schema (idempotent)")
    p_migrate.add_argument("--seed", metavar="FILE", help="JSON array of {name, email} to upsert")
    p_migrate.set_defaults(func=cmd_migrate)

    p_serve = sub.add_parser("serve", help="run the development server")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8080)
    p_serve.add_argument("--debug", action="store_true")
    p_serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ServiceError as e:
        logger.error("{}: {}", e.code, e.message)
        for d in e.details or []:
            logger.error("  {field}: {message}", **d)
        return 1


if __name__ == "__main__":
    sys.exit(main())
