"""
Versioned schema migrations.

Applied versions are recorded in ``schema_migrations``.  Versions are
``YYYYMMDDHHMMSS_description`` strings and run in sorted order; each
migration and its tracking row commit in one transaction.  The DDL
below is a snapshot and must not follow later model changes.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    delete,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class MigrationError(Exception):
    pass


_tracking = MetaData()

schema_migrations = Table(
    "schema_migrations",
    _tracking,
    Column("version", String(255), primary_key=True),
    Column("applied_at", DateTime, server_default=func.current_timestamp()),
)


# Schema as of the migrations below
_schema = MetaData()

categories_table = Table(
    "categories",
    _schema,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    sqlite_autoincrement=True,
)

products_table = Table(
    "products",
    _schema,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("nama", String(255), nullable=False),
    Column("harga", Integer, nullable=False, server_default="0"),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    sqlite_autoincrement=True,
)


@dataclass(frozen=True)
class Migration:
    version: str
    upgrade: Callable[[Connection], None]
    downgrade: Optional[Callable[[Connection], None]] = None


MIGRATIONS: List[Migration] = [
    Migration(
        version="20240101000001_create_categories_table",
        upgrade=lambda conn: categories_table.create(conn, checkfirst=True),
        downgrade=lambda conn: categories_table.drop(conn, checkfirst=True),
    ),
    Migration(
        version="20240101000002_create_products_table",
        upgrade=lambda conn: products_table.create(conn, checkfirst=True),
        downgrade=lambda conn: products_table.drop(conn, checkfirst=True),
    ),
]


def _ensure_tracking_table(engine: Engine) -> None:
    try:
        _tracking.create_all(engine, checkfirst=True)
    except SQLAlchemyError as exc:
        raise MigrationError(f"failed to create migrations table: {exc}") from exc


def applied_versions(engine: Engine) -> List[str]:
    _ensure_tracking_table(engine)
    with engine.connect() as conn:
        rows = conn.execute(select(schema_migrations.c.version))
        return sorted(row.version for row in rows)


def migrate(engine: Engine, migrations: Optional[List[Migration]] = None) -> List[str]:
    """Apply every pending migration; returns the versions applied now."""
    logger.info("Running migrations...")
    done = set(applied_versions(engine))
    applied: List[str] = []

    for migration in sorted(MIGRATIONS if migrations is None else migrations, key=lambda m: m.version):
        if migration.version in done:
            logger.info("  %s (already applied)", migration.version)
            continue

        try:
            with engine.begin() as conn:
                migration.upgrade(conn)
                conn.execute(insert(schema_migrations).values(version=migration.version))
        except SQLAlchemyError as exc:
            raise MigrationError(f"failed to execute migration {migration.version}: {exc}") from exc

        logger.info("  %s (applied)", migration.version)
        applied.append(migration.version)

    logger.info("All migrations completed")
    return applied


def rollback(engine: Engine, migrations: Optional[List[Migration]] = None) -> Optional[str]:
    """Undo the most recently applied migration; returns its version or None.

    A migration without a downgrade only loses its tracking row.
    """
    logger.info("Rolling back last migration...")
    _ensure_tracking_table(engine)
    with engine.connect() as conn:
        # applied_at has second precision; version breaks ties within one run
        version = conn.execute(
            select(schema_migrations.c.version)
            .order_by(schema_migrations.c.applied_at.desc(), schema_migrations.c.version.desc())
            .limit(1)
        ).scalar()
    if version is None:
        logger.info("  No migrations to rollback")
        return None

    by_version = {m.version: m for m in (MIGRATIONS if migrations is None else migrations)}
    migration = by_version.get(version)

    try:
        with engine.begin() as conn:
            if migration is not None and migration.downgrade is not None:
                migration.downgrade(conn)
            conn.execute(delete(schema_migrations).where(schema_migrations.c.version == version))
    except SQLAlchemyError as exc:
        raise MigrationError(f"failed to rollback migration {version}: {exc}") from exc

    if migration is None or migration.downgrade is None:
        logger.info("  %s (removed record only, no downgrade)", version)
    else:
        logger.info("  %s (rolled back)", version)
    return version


def status(engine: Engine) -> List[Tuple[str, Optional[datetime]]]:
    """Applied migrations as ``(version, applied_at)`` in the order they were applied."""
    _ensure_tracking_table(engine)
    with engine.connect() as conn:
        rows = conn.execute(
            select(schema_migrations.c.version, schema_migrations.c.applied_at)
            .order_by(schema_migrations.c.applied_at, schema_migrations.c.version)
        )
        return [(row.version, row.applied_at) for row in rows]
