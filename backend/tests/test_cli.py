# tests/test_cli.py
from sqlalchemy import inspect

from kasir_api.db.session import create_db_engine
from kasir_api.scripts import manage


def test_migrate_and_status_commands(database_url, capsys):
    assert manage.main(["migrate", "--database-url", database_url]) == 0
    assert manage.main(["status", "--database-url", database_url]) == 0

    out = capsys.readouterr().out
    assert "20240101000002_create_products_table" in out

    engine = create_db_engine(database_url)
    assert "products" in inspect(engine).get_table_names()
    engine.dispose()


def test_seed_without_schema_fails(database_url):
    assert manage.main(["seed", "--database-url", database_url]) == 1
