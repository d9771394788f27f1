import logging
from typing import Iterable, List, Optional

from sqlmodel import select

from kasir_api.core.exceptions import NotFoundError
from kasir_api.models import Category
from .base import CategoryRepository, SqlRepository

logger = logging.getLogger(__name__)


def _copy(category: Category) -> Category:
    return Category(id=category.id, name=category.name, description=category.description)


class InMemoryCategoryRepository(CategoryRepository):
    """Categories kept in an ordered list.

    New ids are ``len + 1``, so an id can be handed out again after a
    delete.  The SQL repository never reuses ids.  No locking.
    """

    def __init__(self, initial: Optional[Iterable[Category]] = None):
        self._items: List[Category] = [_copy(c) for c in initial or []]

    def get_all(self) -> List[Category]:
        return [_copy(c) for c in self._items]

    def get_by_id(self, category_id: int) -> Category:
        for c in self._items:
            if c.id == category_id:
                return _copy(c)
        raise NotFoundError("Category", category_id)

    def create(self, category: Category) -> Category:
        new = Category(
            id=len(self._items) + 1,
            name=category.name,
            description=category.description,
        )
        self._items.append(new)
        logger.debug("Created category %s in memory", new.id)
        return _copy(new)

    def update(self, category_id: int, category: Category) -> Category:
        for i, c in enumerate(self._items):
            if c.id == category_id:
                self._items[i] = Category(
                    id=category_id,
                    name=category.name,
                    description=category.description,
                )
                return _copy(self._items[i])
        raise NotFoundError("Category", category_id)

    def delete(self, category_id: int) -> None:
        for i, c in enumerate(self._items):
            if c.id == category_id:
                del self._items[i]
                logger.debug("Deleted category %s from memory", category_id)
                return
        raise NotFoundError("Category", category_id)


class SqlCategoryRepository(SqlRepository, CategoryRepository):
    def get_all(self) -> List[Category]:
        with self.session() as db:
            return list(db.exec(select(Category)).all())

    def get_by_id(self, category_id: int) -> Category:
        with self.session() as db:
            category = db.get(Category, category_id)
            if not category:
                raise NotFoundError("Category", category_id)
            return category

    def create(self, category: Category) -> Category:
        row = Category(name=category.name, description=category.description)
        with self.session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
        logger.debug("Inserted category %s", row.id)
        return row

    def update(self, category_id: int, category: Category) -> Category:
        with self.session() as db:
            row = db.get(Category, category_id)
            if not row:
                raise NotFoundError("Category", category_id)

            row.name = category.name
            row.description = category.description
            db.add(row)
            db.commit()
            db.refresh(row)
            return row

    def delete(self, category_id: int) -> None:
        with self.session() as db:
            row = db.get(Category, category_id)
            if not row:
                raise NotFoundError("Category", category_id)

            db.delete(row)
            db.commit()
        logger.debug("Deleted category %s", category_id)
