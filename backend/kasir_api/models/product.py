from sqlmodel import SQLModel, Field
from typing import Optional


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    nama: str
    harga: int = Field(default=0)  # rupiah

    # Deleting the category clears the reference, it never blocks the delete
    category_id: Optional[int] = Field(
        default=None,
        foreign_key="categories.id",
        ondelete="SET NULL",
    )
