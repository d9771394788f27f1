"""
Management commands: server, migrations and seed data.
Usage: python -m kasir_api.scripts.manage <command>
"""
import argparse
import logging
import sys

from kasir_api.core.config import settings
from kasir_api.core.logging_config import setup_logging
from kasir_api.db import migration
from kasir_api.db.migration import MigrationError
from kasir_api.db.seeder import Seeder, SeederError
from kasir_api.db.session import create_db_engine, ensure_database

logger = logging.getLogger(__name__)

COMMANDS = ["serve", "migrate", "rollback", "status", "seed", "refresh", "clear"]


def serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "kasir_api.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        reload=args.reload,
    )


def run_command(command: str, database_url: str) -> None:
    if settings.CREATE_DATABASE:
        ensure_database(database_url)
    engine = create_db_engine(database_url)
    try:
        if command == "migrate":
            migration.migrate(engine)
        elif command == "rollback":
            migration.rollback(engine)
        elif command == "status":
            rows = migration.status(engine)
            print("Applied migrations:")
            for version, applied_at in rows:
                print(f"  {version} (applied at {applied_at})")
            if not rows:
                print("  none")
        elif command == "seed":
            Seeder(engine).run()
        elif command == "refresh":
            Seeder(engine).refresh()
        elif command == "clear":
            Seeder(engine).clear()
    finally:
        engine.dispose()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="kasir-api", description=__doc__)
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if args.command == "serve":
        serve(args)
        return 0

    try:
        run_command(args.command, args.database_url or settings.DATABASE_URL)
    except (MigrationError, SeederError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
