from pydantic import BaseModel, field_validator
from typing import Optional


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str = ""

    class Config:
        from_attributes = True


class CategoryCreate(BaseModel):
    id: Optional[int] = None  # ignored, the store assigns ids
    name: str = ""
    description: str = ""

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_means_empty(cls, value):
        # Missing and null text fields both decode to ""
        return "" if value is None else value


class CategoryUpdate(CategoryCreate):
    """Full replace of a category; the path id wins over ``id``."""
