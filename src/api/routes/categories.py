"""Category API routes."""

from fastapi import APIRouter, status

from src.api.deps import AdminUser, CategoryServiceDep
from src.schemas.category import CategoryListResponse, CategoryResponse, CategoryWrite
from src.schemas.common import MessageResponse

router = APIRouter(prefix="/categories", tags=["catalog"])


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_categories(service: CategoryServiceDep) -> CategoryListResponse:
    categories = await service.list_categories()
    return CategoryListResponse(items=[CategoryResponse(**row) for row in categories])


admin_router = APIRouter(prefix="/admin/categories", tags=["admin"])


@admin_router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    data: CategoryWrite,
    admin: AdminUser,
    service: CategoryServiceDep,
) -> CategoryResponse:
    category = await service.create_category(data)
    return CategoryResponse(**category)


@admin_router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Replace category",
)
async def update_category(
    category_id: int,
    data: CategoryWrite,
    admin: AdminUser,
    service: CategoryServiceDep,
) -> CategoryResponse:
    category = await service.update_category(category_id, data)
    return CategoryResponse(**category)


@admin_router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete category",
)
async def delete_category(
    category_id: int,
    admin: AdminUser,
    service: CategoryServiceDep,
) -> MessageResponse:
    await service.delete_category(category_id)
    return MessageResponse(message="Category deleted")
