# -*- coding: utf-8 -*-
"""
CLI tool for managing the Uplift database and server.

Usage:
    python -m uplift.cli init-db
    python -m uplift.cli seed
    python -m uplift.cli serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import settings


def _db_path(args: argparse.Namespace) -> Path:
    return Path(args.db_path) if args.db_path else settings.db_path


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create the schema (idempotent)."""
    from .app_db import init_app_db

    db_path = _db_path(args)
    init_app_db(db_path)
    print(f"Database ready: {db_path}")
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    """Insert the global exercise and food catalogue."""
    from .app_db import Database
    from .seed import seed_catalogue

    db = Database(_db_path(args), pool_size=1, timeout=settings.db_timeout)
    db.open()
    try:
        exercises, foods = seed_catalogue(db)
    finally:
        db.close()

    print(f"Added {exercises} exercises and {foods} food items")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    if args.db_path:
        settings.db_path = Path(args.db_path)
    uvicorn.run(
        "uplift.api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=False,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Uplift CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db-path",
        help="Path to the SQLite database (default: UPLIFT_DB_PATH or data/uplift.db)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Seed global exercises and foods")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, help=f"Port (default: {settings.port})")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "init-db": cmd_init_db,
        "seed": cmd_seed,
        "serve": cmd_serve,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
