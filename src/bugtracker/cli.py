"""Bug tracker CLI entry point"""

import argparse
import logging
from typing import List, Optional

import uvicorn

from .config import Settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def init_database(database_url: str):
    """Create or upgrade the bug store schema"""
    from .storage.migrations import initialize_database

    initialize_database(database_url)
    print(f"Bug database ready at {database_url}")


def serve(host: str, port: int, reload: bool = False, log_level: str = "info"):
    """Start the bug tracker API server"""
    uvicorn.run(
        "bugtracker.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Bug Tracker - minimal bug tracking API")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Init command
    init_parser = subparsers.add_parser("init", help="Create or upgrade the bug database")
    init_parser.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=settings.host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_dir)

    if args.command == "init":
        init_database(args.database_url)
    elif args.command == "serve":
        serve(args.host, args.port, args.reload, settings.log_level)
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
