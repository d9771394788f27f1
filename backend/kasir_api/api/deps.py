from fastapi import Path, Request
from typing import Annotated
from kasir_api.services import CategoryService, ProductService

# Ids must fit a signed 64-bit column on every backend
EntityId = Annotated[int, Path(ge=-2**63, le=2**63 - 1)]


# Services are built once in create_app and live on app.state
def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service
