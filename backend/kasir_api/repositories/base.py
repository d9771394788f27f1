"""
Repository contracts and the shared SQL plumbing.

Each resource has one abstract repository with two implementations:
an in-memory list (demo path) and a SQL table.  Both raise
``NotFoundError`` for a missing id; the SQL ones turn driver failures
into ``StoreError``.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from kasir_api.core.exceptions import StoreError
from kasir_api.models import Category, Product

logger = logging.getLogger(__name__)


class CategoryRepository(ABC):
    @abstractmethod
    def get_all(self) -> List[Category]: ...

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category: ...

    @abstractmethod
    def create(self, category: Category) -> Category: ...

    @abstractmethod
    def update(self, category_id: int, category: Category) -> Category: ...

    @abstractmethod
    def delete(self, category_id: int) -> None: ...


class ProductRepository(ABC):
    @abstractmethod
    def get_all(self) -> List[Product]: ...

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product: ...

    @abstractmethod
    def create(self, product: Product) -> Product: ...

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Product: ...

    @abstractmethod
    def delete(self, product_id: int) -> None: ...


class SqlRepository:
    """Opens one session per call, so every call is its own transaction."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Store failure in %s", type(self).__name__)
            raise StoreError(str(getattr(exc, "orig", None) or exc)) from exc
