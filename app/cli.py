"""
CLI entry point for the person service.

Usage:
    # Create the database schema
    python -m app.cli init-db

    # Import a CSV file from disk
    python -m app.cli import data/sample-input.csv

    # Start the HTTP API
    python -m app.cli serve --port 8080
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def _engine(args: argparse.Namespace):
    from app.infrastructure.persons.database import create_db_engine, create_tables

    engine = create_db_engine(args.database_url, echo=settings.database_echo)
    create_tables(engine)
    return engine


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create the persons schema."""
    _engine(args).dispose()
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    """Import a CSV file through the same use case as POST /import."""
    from app.application.persons.dtos import ImportLineStatus, ImportPersonsCommand
    from app.application.persons.import_persons import ImportPersonsUseCase
    from app.domain.persons.errors import PersonDomainError
    from app.infrastructure.persons.person_repository import SqlPersonRepositoryAdapter

    path = Path(args.path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc.strerror)
        return 1

    engine = _engine(args)
    use_case = ImportPersonsUseCase(person_repo=SqlPersonRepositoryAdapter(engine))
    try:
        result = use_case.execute(
            ImportPersonsCommand(content=content, filename=path.name)
        )
    except PersonDomainError as exc:
        logger.error("Import failed: %s", exc.message)
        return 1
    finally:
        engine.dispose()

    logger.info("=" * 60)
    logger.info("IMPORT COMPLETE: %s", path.name)
    logger.info("=" * 60)
    logger.info("Imported: %d", result.imported)
    logger.info("Skipped:  %d", result.skipped)
    for line in result.lines:
        if line.status is ImportLineStatus.SKIPPED:
            logger.info("  line %d skipped: %s", line.line_number, line.reason)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    logger.info(
        "Starting %s at http://%s:%d%s",
        settings.project_name,
        args.host,
        args.port,
        settings.api_prefix,
    )
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Person service CLI")
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Database URL for init-db and import (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_parser.set_defaults(func=cmd_init_db)

    import_parser = subparsers.add_parser("import", help="Import persons from a CSV file")
    import_parser.add_argument("path", help="CSV file with firstName,lastName,address,color")
    import_parser.set_defaults(func=cmd_import)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
