"""
Seed data for a fresh database.

Each seeder only inserts into an empty table, so running it on every
startup is safe.
"""
import logging
from typing import List, NamedTuple

from sqlalchemy import delete, func, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from kasir_api.models import Category, Product

logger = logging.getLogger(__name__)


class SeederError(Exception):
    pass


class CategorySeed(NamedTuple):
    name: str
    description: str


class ProductSeed(NamedTuple):
    nama: str
    harga: int
    category_name: str


DEFAULT_CATEGORIES: List[CategorySeed] = [
    CategorySeed("Minuman", "Segala jenis minuman"),
    CategorySeed("Makanan", "Segala jenis makanan"),
    CategorySeed("Snack", "Makanan ringan dan cemilan"),
    CategorySeed("Elektronik", "Barang elektronik dan gadget"),
]

DEFAULT_PRODUCTS: List[ProductSeed] = [
    ProductSeed("Es Teh Manis", 5000, "Minuman"),
    ProductSeed("Kopi Hitam", 8000, "Minuman"),
    ProductSeed("Nasi Goreng", 15000, "Makanan"),
    ProductSeed("Mie Ayam", 12000, "Makanan"),
    ProductSeed("Keripik Kentang", 8000, "Snack"),
    ProductSeed("Chocolatos", 2000, "Snack"),
]

# Rows of the in-memory backend
DEMO_CATEGORIES: List[Category] = [
    Category(id=1, name="Minuman", description="Segala jenis minuman"),
    Category(id=2, name="Makanan", description="Segala jenis makanan"),
]

DEMO_PRODUCTS: List[Product] = [
    Product(id=1, nama="Produk A", harga=10000, category_id=1),
    Product(id=2, nama="Produk B", harga=20000, category_id=2),
    Product(id=3, nama="Produk C", harga=30000, category_id=1),
]


def _count(db: Session, model) -> int:
    return db.exec(select(func.count()).select_from(model)).one()


def seed_categories(db: Session, seeds: List[CategorySeed] = DEFAULT_CATEGORIES) -> int:
    """Insert the default categories into an empty table; returns rows inserted."""
    count = _count(db, Category)
    if count > 0:
        logger.info("Categories already seeded (%d records exist)", count)
        return 0

    for seed in seeds:
        db.add(Category(name=seed.name, description=seed.description))
        logger.info("  Category: %s", seed.name)
    db.commit()

    logger.info("Seeded %d categories", len(seeds))
    return len(seeds)


def seed_products(db: Session, seeds: List[ProductSeed] = DEFAULT_PRODUCTS) -> int:
    """Insert the default products, resolving categories by name.

    Products whose category is missing are skipped.
    """
    count = _count(db, Product)
    if count > 0:
        logger.info("Products already seeded (%d records exist)", count)
        return 0

    inserted = 0
    for seed in seeds:
        category = db.exec(select(Category).where(Category.name == seed.category_name)).first()
        if not category:
            logger.warning("Skipping %s: category '%s' not found", seed.nama, seed.category_name)
            continue

        db.add(Product(nama=seed.nama, harga=seed.harga, category_id=category.id))
        logger.info("  Product: %s (Rp %d) - %s", seed.nama, seed.harga, seed.category_name)
        inserted += 1
    db.commit()

    logger.info("Seeded %d products", inserted)
    return inserted


class Seeder:
    def __init__(self, engine: Engine):
        self.engine = engine

    def run(self) -> None:
        logger.info("Running database seeders...")
        with Session(self.engine) as db:
            try:
                seed_categories(db)
            except SQLAlchemyError as exc:
                raise SeederError(f"category seeder failed: {exc}") from exc
            try:
                seed_products(db)
            except SQLAlchemyError as exc:
                raise SeederError(f"product seeder failed: {exc}") from exc
        logger.info("All seeders completed successfully")

    def clear(self) -> None:
        """Delete all rows (products first) and restart the id sequences."""
        logger.info("Clearing all data...")
        try:
            with self.engine.begin() as conn:
                conn.execute(delete(Product))
                conn.execute(delete(Category))

                dialect = self.engine.dialect.name
                if dialect == "postgresql":
                    conn.execute(text("ALTER SEQUENCE products_id_seq RESTART WITH 1"))
                    conn.execute(text("ALTER SEQUENCE categories_id_seq RESTART WITH 1"))
                elif dialect == "sqlite":
                    conn.execute(text(
                        "DELETE FROM sqlite_sequence WHERE name IN ('products', 'categories')"
                    ))
        except SQLAlchemyError as exc:
            raise SeederError(f"failed to clear data: {exc}") from exc
        logger.info("All data cleared")

    def refresh(self) -> None:
        self.clear()
        self.run()
