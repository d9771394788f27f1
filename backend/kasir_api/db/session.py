"""
Database connections
"""
import logging
from sqlalchemy import event, text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "kasir_api"


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Engine for ``database_url``; SQLite connections enforce foreign keys."""
    is_sqlite = database_url.startswith("sqlite")

    # SQLite needs check_same_thread=False for the threadpool FastAPI runs sync routes in
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    engine = create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=not is_sqlite,
        connect_args=connect_args,
    )

    if is_sqlite:
        # Off by default in SQLite; ON DELETE SET NULL depends on it
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def extract_db_name(database_url: str) -> str:
    """Database name from a connection URL, ``kasir_api`` when it has none."""
    return make_url(database_url).database or DEFAULT_DB_NAME


def replace_db_name(database_url: str, db_name: str) -> str:
    url = make_url(database_url).set(database=db_name)
    return url.render_as_string(hide_password=False)


def ensure_database(database_url: str) -> bool:
    """Create the target PostgreSQL database if it does not exist yet.

    Connects to the ``postgres`` maintenance database to check
    ``pg_database``.  Other dialects are left alone.  Returns True when
    a database was created.
    """
    if not make_url(database_url).get_backend_name().startswith("postgresql"):
        return False

    db_name = extract_db_name(database_url)
    admin_engine = create_engine(
        replace_db_name(database_url, "postgres"),
        isolation_level="AUTOCOMMIT",
    )
    try:
        with admin_engine.connect() as conn:
            exists = conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": db_name},
            ).scalar()
            if exists:
                return False

            # Identifiers cannot be bound parameters
            preparer = admin_engine.dialect.identifier_preparer
            conn.execute(text(f"CREATE DATABASE {preparer.quote(db_name)}"))
            logger.info("Created database %s", db_name)
            return True
    finally:
        admin_engine.dispose()
