import logging
from typing import Iterable, List, Optional

from sqlmodel import select

from kasir_api.core.exceptions import NotFoundError
from kasir_api.models import Product
from .base import ProductRepository, SqlRepository

logger = logging.getLogger(__name__)


def _copy(product: Product) -> Product:
    return Product(
        id=product.id,
        nama=product.nama,
        harga=product.harga,
        category_id=product.category_id,
    )


class InMemoryProductRepository(ProductRepository):
    """Products kept in an ordered list, ids assigned as ``len + 1``.

    Deleting a category does not touch the products pointing at it.
    """

    def __init__(self, initial: Optional[Iterable[Product]] = None):
        self._items: List[Product] = [_copy(p) for p in initial or []]

    def get_all(self) -> List[Product]:
        return [_copy(p) for p in self._items]

    def get_by_id(self, product_id: int) -> Product:
        for p in self._items:
            if p.id == product_id:
                return _copy(p)
        raise NotFoundError("Product", product_id)

    def create(self, product: Product) -> Product:
        new = _copy(product)
        new.id = len(self._items) + 1
        self._items.append(new)
        logger.debug("Created product %s in memory", new.id)
        return _copy(new)

    def update(self, product_id: int, product: Product) -> Product:
        for i, p in enumerate(self._items):
            if p.id == product_id:
                updated = _copy(product)
                updated.id = product_id
                self._items[i] = updated
                return _copy(updated)
        raise NotFoundError("Product", product_id)

    def delete(self, product_id: int) -> None:
        for i, p in enumerate(self._items):
            if p.id == product_id:
                del self._items[i]
                logger.debug("Deleted product %s from memory", product_id)
                return
        raise NotFoundError("Product", product_id)


class SqlProductRepository(SqlRepository, ProductRepository):
    def get_all(self) -> List[Product]:
        with self.session() as db:
            return list(db.exec(select(Product)).all())

    def get_by_id(self, product_id: int) -> Product:
        with self.session() as db:
            product = db.get(Product, product_id)
            if not product:
                raise NotFoundError("Product", product_id)
            return product

    def create(self, product: Product) -> Product:
        row = Product(nama=product.nama, harga=product.harga, category_id=product.category_id)
        with self.session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
        logger.debug("Inserted product %s", row.id)
        return row

    def update(self, product_id: int, product: Product) -> Product:
        with self.session() as db:
            row = db.get(Product, product_id)
            if not row:
                raise NotFoundError("Product", product_id)

            row.nama = product.nama
            row.harga = product.harga
            row.category_id = product.category_id
            db.add(row)
            db.commit()
            db.refresh(row)
            return row

    def delete(self, product_id: int) -> None:
        with self.session() as db:
            row = db.get(Product, product_id)
            if not row:
                raise NotFoundError("Product", product_id)

            db.delete(row)
            db.commit()
        logger.debug("Deleted product %s", product_id)
