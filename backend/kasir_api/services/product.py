import logging
from typing import List
from kasir_api.core.exceptions import NotFoundError, StoreError
from kasir_api.models import Product
from kasir_api.repositories import CategoryRepository, ProductRepository
from kasir_api.schemas.category import CategoryResponse
from kasir_api.schemas.product import ProductDetailResponse

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, product_repo: ProductRepository, category_repo: CategoryRepository):
        self.product_repo = product_repo
        self.category_repo = category_repo

    def get_all_products(self) -> List[Product]:
        return self.product_repo.get_all()

    def get_product_by_id(self, product_id: int) -> ProductDetailResponse:
        """Product with its category attached when the reference resolves.

        Two separate reads, not a transaction: a category deleted in
        between just leaves ``category`` unset.
        """
        product = self.product_repo.get_by_id(product_id)

        detail = ProductDetailResponse(
            id=product.id,
            nama=product.nama,
            harga=product.harga,
            category_id=product.category_id,
        )
        if product.category_id is None:
            return detail

        try:
            category = self.category_repo.get_by_id(product.category_id)
        except NotFoundError:
            return detail
        except StoreError as exc:
            logger.warning(
                "Category %s lookup for product %s failed: %s",
                product.category_id, product_id, exc.message,
            )
            return detail

        detail.category = CategoryResponse.model_validate(category)
        return detail

    def create_product(self, product: Product) -> Product:
        return self.product_repo.create(product)

    def update_product(self, product_id: int, product: Product) -> Product:
        return self.product_repo.update(product_id, product)

    def delete_product(self, product_id: int) -> None:
        self.product_repo.delete(product_id)
