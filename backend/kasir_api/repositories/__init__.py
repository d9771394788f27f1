from .base import CategoryRepository, ProductRepository
from .category import InMemoryCategoryRepository, SqlCategoryRepository
from .product import InMemoryProductRepository, SqlProductRepository

__all__ = [
    "CategoryRepository", "ProductRepository",
    "InMemoryCategoryRepository", "SqlCategoryRepository",
    "InMemoryProductRepository", "SqlProductRepository",
]
