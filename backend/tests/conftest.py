# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment is set before importing kasir_api, whose module-level app
# reads settings on import.

import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from kasir_api.core.config import Settings
from kasir_api.db import migration
from kasir_api.db.session import create_db_engine
from kasir_api.main import create_app
from kasir_api.repositories import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    SqlCategoryRepository,
    SqlProductRepository,
)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'kasir_test.db'}"


@pytest.fixture
def engine(database_url):
    """SQLite engine with the schema migrated, no seed data."""
    engine = create_db_engine(database_url)
    migration.migrate(engine)
    yield engine
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def repos(request):
    """(category_repo, product_repo) for each backend, both empty."""
    if request.param == "memory":
        yield InMemoryCategoryRepository(), InMemoryProductRepository()
    else:
        engine = request.getfixturevalue("engine")
        yield SqlCategoryRepository(engine), SqlProductRepository(engine)


@pytest.fixture
def memory_client():
    """Client for the in-memory app, pre-populated with the demo rows."""
    app = create_app(Settings(STORAGE_BACKEND="memory", LOG_LEVEL="WARNING"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sql_client(database_url):
    """Client for the SQL app on an empty migrated SQLite database."""
    app = create_app(Settings(
        STORAGE_BACKEND="sql",
        DATABASE_URL=database_url,
        RUN_MIGRATIONS=True,
        RUN_SEEDERS=False,
        LOG_LEVEL="WARNING",
    ))
    with TestClient(app) as client:
        yield client


@pytest.fixture(params=["memory", "sql"])
def client(request):
    yield request.getfixturevalue(f"{request.param}_client")
