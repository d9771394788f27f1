# tests/test_seeder.py
from sqlmodel import Session, select

from kasir_api.db.seeder import (
    DEFAULT_CATEGORIES,
    DEFAULT_PRODUCTS,
    ProductSeed,
    Seeder,
    seed_products,
)
from kasir_api.models import Category, Product


def _all(engine, model):
    with Session(engine) as db:
        return list(db.exec(select(model)).all())


def test_seeder_fills_empty_tables(engine):
    Seeder(engine).run()

    categories = _all(engine, Category)
    products = _all(engine, Product)
    assert [c.name for c in categories] == [s.name for s in DEFAULT_CATEGORIES]
    assert len(products) == len(DEFAULT_PRODUCTS)

    by_id = {c.id: c.name for c in categories}
    es_teh = next(p for p in products if p.nama == "Es Teh Manis")
    assert by_id[es_teh.category_id] == "Minuman"


def test_seeder_is_idempotent(engine):
    Seeder(engine).run()
    Seeder(engine).run()

    assert len(_all(engine, Category)) == len(DEFAULT_CATEGORIES)
    assert len(_all(engine, Product)) == len(DEFAULT_PRODUCTS)


def test_seed_products_skips_unknown_category(engine):
    with Session(engine) as db:
        db.add(Category(name="Minuman", description=""))
        db.commit()

        inserted = seed_products(db, [
            ProductSeed("Es Teh", 5000, "Minuman"),
            ProductSeed("Laptop", 9000000, "Komputer"),
        ])

    assert inserted == 1
    assert [p.nama for p in _all(engine, Product)] == ["Es Teh"]


def test_refresh_restarts_ids(engine):
    seeder = Seeder(engine)
    seeder.run()
    seeder.refresh()

    categories = _all(engine, Category)
    assert min(c.id for c in categories) == 1
    assert len(categories) == len(DEFAULT_CATEGORIES)


def test_clear_empties_tables(engine):
    seeder = Seeder(engine)
    seeder.run()
    seeder.clear()

    assert _all(engine, Category) == []
    assert _all(engine, Product) == []


def test_sql_app_runs_seeders_on_startup(database_url):
    from fastapi.testclient import TestClient
    from kasir_api.core.config import Settings
    from kasir_api.main import create_app

    app = create_app(Settings(STORAGE_BACKEND="sql", DATABASE_URL=database_url, LOG_LEVEL="WARNING"))
    with TestClient(app) as client:
        names = [c["name"] for c in client.get("/api/categories").json()]

    assert names == [s.name for s in DEFAULT_CATEGORIES]
