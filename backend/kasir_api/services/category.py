from typing import List
from kasir_api.models import Category
from kasir_api.repositories import CategoryRepository


class CategoryService:
    """Category use cases; currently forwards straight to the repository."""

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def get_all_categories(self) -> List[Category]:
        return self.repo.get_all()

    def get_category_by_id(self, category_id: int) -> Category:
        return self.repo.get_by_id(category_id)

    def create_category(self, category: Category) -> Category:
        return self.repo.create(category)

    def update_category(self, category_id: int, category: Category) -> Category:
        return self.repo.update(category_id, category)

    def delete_category(self, category_id: int) -> None:
        self.repo.delete(category_id)
