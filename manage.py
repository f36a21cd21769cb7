#!/usr/bin/env python3
"""
=============================================================================
TASK MANAGER API - DEVELOPER COMMANDS
=============================================================================
The single entry point for local operations.

Usage:
    python manage.py serve       # Run the API with uvicorn (supports --reload)
    python manage.py init-db     # Create all tables for DATABASE_URL
    python manage.py drop-db     # Drop all tables (asks unless --yes)
"""

import argparse
import sys
from typing import List, Optional

from task_manager_api.config import settings


# Colors for terminal output
class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def log(msg, color=Colors.ENDC):
    print(f"{color}{msg}{Colors.ENDC}")


# --- COMMANDS ---

def serve(host: str, port: int, reload: bool = False) -> None:
    """Launches the API in the foreground."""
    import uvicorn

    log(f"\n🚀 Serving on http://{host}:{port}{settings.api_prefix}", Colors.HEADER)
    uvicorn.run("task_manager_api.main:app", host=host, port=port, reload=reload)


def init_db() -> None:
    """Creates every table that does not exist yet."""
    from task_manager_api.db.models import Base
    from task_manager_api.db.session import build_engine

    log("\n🏗️  Creating tables", Colors.HEADER)
    engine = build_engine(settings)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
    log(f"   ✅ Schema ready at {settings.DATABASE_URL}", Colors.GREEN)


def drop_db(assume_yes: bool = False) -> bool:
    """Drops every table. Returns False when the user declines."""
    from task_manager_api.db.models import Base
    from task_manager_api.db.session import build_engine

    if not assume_yes:
        answer = input(f"Drop all tables in {settings.DATABASE_URL}? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            log("   Aborted.", Colors.WARNING)
            return False

    log("\n🧹 Dropping tables", Colors.WARNING)
    engine = build_engine(settings)
    try:
        Base.metadata.drop_all(bind=engine)
    finally:
        engine.dispose()
    log("   ✅ All tables dropped.", Colors.GREEN)
    return True


# --- MAIN ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Task Manager API commands")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=settings.PORT, help="Port to bind")
    serve_parser.add_argument("--reload", action="store_true", help="Restart on code changes")

    # Database
    subparsers.add_parser("init-db", help="Create database tables")
    drop_parser = subparsers.add_parser("drop-db", help="Drop database tables")
    drop_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to help
    if not args.command:
        parser.print_help()
        return 0

    if args.command == "serve":
        serve(args.host, args.port, reload=args.reload)

    elif args.command == "init-db":
        init_db()

    elif args.command == "drop-db":
        return 0 if drop_db(assume_yes=args.yes) else 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log("\n🛑 Aborted by user.", Colors.WARNING)
