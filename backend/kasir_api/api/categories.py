from fastapi import APIRouter, Depends, status
from typing import List
from kasir_api.api.deps import EntityId, get_category_service
from kasir_api.models import Category
from kasir_api.schemas import CategoryResponse, CategoryCreate, CategoryUpdate, MessageResponse
from kasir_api.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse], summary="List all categories")
@router.get("/", response_model=List[CategoryResponse], include_in_schema=False)
def list_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_all_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
@router.post(
    "/",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    category = Category(**data.model_dump(exclude={"id"}))
    return service.create_category(category)


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get category by ID")
def get_category(
    category_id: EntityId,
    service: CategoryService = Depends(get_category_service)
):
    return service.get_category_by_id(category_id)


@router.put("/{category_id}", response_model=CategoryResponse, summary="Update category")
def update_category(
    category_id: EntityId,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    category = Category(**data.model_dump(exclude={"id"}))
    return service.update_category(category_id, category)


@router.delete("/{category_id}", response_model=MessageResponse, summary="Delete category")
def delete_category(
    category_id: EntityId,
    service: CategoryService = Depends(get_category_service)
):
    service.delete_category(category_id)
    return {"message": "Category deleted successfully"}
