from .category import CategoryResponse, CategoryCreate, CategoryUpdate
from .product import ProductResponse, ProductDetailResponse, ProductCreate, ProductUpdate
from .common import MessageResponse, HealthResponse

__all__ = [
    "CategoryResponse", "CategoryCreate", "CategoryUpdate",
    "ProductResponse", "ProductDetailResponse", "ProductCreate", "ProductUpdate",
    "MessageResponse", "HealthResponse",
]
