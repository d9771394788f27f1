from fastapi import APIRouter, Depends, status
from typing import List
from kasir_api.api.deps import EntityId, get_product_service
from kasir_api.models import Product
from kasir_api.schemas import (
    ProductResponse, ProductDetailResponse, ProductCreate, ProductUpdate,
    MessageResponse,
)
from kasir_api.services import ProductService

router = APIRouter(prefix="/api/produk", tags=["products"])


@router.get("", response_model=List[ProductResponse], summary="List all products")
@router.get("/", response_model=List[ProductResponse], include_in_schema=False)
def list_products(service: ProductService = Depends(get_product_service)):
    return service.get_all_products()


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    product = Product(**data.model_dump(exclude={"id"}))
    return service.create_product(product)


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    response_model_exclude_unset=True,
    summary="Get product by ID with its category",
)
def get_product(
    product_id: EntityId,
    service: ProductService = Depends(get_product_service)
):
    """Product detail; ``category`` is present only when it resolves"""
    return service.get_product_by_id(product_id)


@router.put("/{product_id}", response_model=ProductResponse, summary="Update product")
def update_product(
    product_id: EntityId,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    product = Product(**data.model_dump(exclude={"id"}))
    return service.update_product(product_id, product)


@router.delete("/{product_id}", response_model=MessageResponse, summary="Delete product")
def delete_product(
    product_id: EntityId,
    service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return {"message": "Product deleted successfully"}
