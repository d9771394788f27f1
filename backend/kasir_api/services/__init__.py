from .category import CategoryService
from .product import ProductService

__all__ = ["CategoryService", "ProductService"]
