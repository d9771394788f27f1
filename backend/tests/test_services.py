# tests/test_services.py
import pytest

from kasir_api.core.exceptions import NotFoundError, StoreError
from kasir_api.models import Category, Product
from kasir_api.repositories import InMemoryCategoryRepository, InMemoryProductRepository
from kasir_api.services import CategoryService, ProductService


class BrokenCategoryRepository(InMemoryCategoryRepository):
    def get_by_id(self, category_id):
        raise StoreError("connection reset")


@pytest.fixture
def category_repo():
    return InMemoryCategoryRepository([Category(id=1, name="Minuman", description="drinks")])


@pytest.fixture
def product_repo():
    return InMemoryProductRepository([
        Product(id=1, nama="Es Teh", harga=5000, category_id=1),
        Product(id=2, nama="Lost", harga=100, category_id=99),
        Product(id=3, nama="Loose", harga=200, category_id=None),
    ])


@pytest.fixture
def service(product_repo, category_repo):
    return ProductService(product_repo, category_repo)


def test_product_detail_attaches_category(service):
    detail = service.get_product_by_id(1)

    assert detail.category is not None
    assert detail.category.model_dump() == {"id": 1, "name": "Minuman", "description": "drinks"}


def test_product_detail_with_dangling_category_has_no_category(service):
    detail = service.get_product_by_id(2)

    assert detail.category is None
    assert "category" not in detail.model_dump(exclude_unset=True)
    assert detail.category_id == 99


def test_product_detail_without_category_id(service):
    detail = service.get_product_by_id(3)
    assert "category" not in detail.model_dump(exclude_unset=True)


def test_product_detail_missing_product_skips_category_lookup(product_repo):
    calls = []

    class CountingCategoryRepository(InMemoryCategoryRepository):
        def get_by_id(self, category_id):
            calls.append(category_id)
            return super().get_by_id(category_id)

    service = ProductService(product_repo, CountingCategoryRepository())
    with pytest.raises(NotFoundError):
        service.get_product_by_id(9999)
    assert calls == []


def test_product_detail_store_failure_on_category_is_best_effort(product_repo):
    service = ProductService(product_repo, BrokenCategoryRepository())

    detail = service.get_product_by_id(1)

    assert detail.id == 1
    assert detail.category is None


def test_category_deleted_after_product_created(service, category_repo):
    category_repo.delete(1)
    assert service.get_product_by_id(1).category is None


def test_category_service_forwards_to_repository(category_repo):
    service = CategoryService(category_repo)

    created = service.create_category(Category(name="Snack", description="cemilan"))
    assert service.get_category_by_id(created.id).name == "Snack"

    service.update_category(created.id, Category(name="Snacks", description=""))
    assert [c.name for c in service.get_all_categories()] == ["Minuman", "Snacks"]

    service.delete_category(created.id)
    with pytest.raises(NotFoundError):
        service.get_category_by_id(created.id)
