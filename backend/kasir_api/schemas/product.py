from pydantic import BaseModel, field_validator
from typing import Optional
from .category import CategoryResponse


class ProductResponse(BaseModel):
    id: int
    nama: str
    harga: int
    category_id: Optional[int] = None

    class Config:
        from_attributes = True


class ProductDetailResponse(ProductResponse):
    """Product with its category attached when it resolves.

    ``category`` is left unset (and dropped from the JSON) otherwise.
    """
    category: Optional[CategoryResponse] = None


class ProductCreate(BaseModel):
    id: Optional[int] = None  # ignored, the store assigns ids
    nama: str = ""
    harga: int = 0
    category_id: Optional[int] = None

    @field_validator("nama", mode="before")
    @classmethod
    def null_nama_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("harga", mode="before")
    @classmethod
    def null_harga_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("category_id")
    @classmethod
    def zero_means_no_category(cls, value: Optional[int]) -> Optional[int]:
        # Clients send 0 for "no category"
        return value or None


class ProductUpdate(ProductCreate):
    """Full replace of a product; the path id wins over ``id``."""
