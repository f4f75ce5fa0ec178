"""Brand API routes."""

from fastapi import APIRouter, status

from src.api.deps import AdminUser, BrandServiceDep
from src.schemas.brand import (
    BrandListResponse,
    BrandReorderRequest,
    BrandResponse,
    BrandWrite,
)
from src.schemas.common import MessageResponse

router = APIRouter(prefix="/brands", tags=["catalog"])


@router.get(
    "",
    response_model=BrandListResponse,
    summary="List brands",
    description="Lists brands in storefront display order.",
)
async def list_brands(service: BrandServiceDep) -> BrandListResponse:
    brands = await service.list_brands()
    return BrandListResponse(items=[BrandResponse(**row) for row in brands])


admin_router = APIRouter(prefix="/admin/brands", tags=["admin"])


@admin_router.post(
    "",
    response_model=BrandResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create brand",
)
async def create_brand(
    data: BrandWrite,
    admin: AdminUser,
    service: BrandServiceDep,
) -> BrandResponse:
    brand = await service.create_brand(data)
    return BrandResponse(**brand)


# Declared before /{brand_id} so "reorder" is not parsed as an id
@admin_router.put(
    "/reorder",
    response_model=BrandListResponse,
    summary="Reorder brands",
    description="Sets each brand's display position from its index in the submitted list.",
)
async def reorder_brands(
    data: BrandReorderRequest,
    admin: AdminUser,
    service: BrandServiceDep,
) -> BrandListResponse:
    """Persist a new brand display order.

    Raises:
        ValidationError: 422 if an id is repeated.
        NotFoundError: 404 if an id matches no brand.
    """
    brands = await service.reorder_brands(data.ids)
    return BrandListResponse(items=[BrandResponse(**row) for row in brands])


@admin_router.put(
    "/{brand_id}",
    response_model=BrandResponse,
    summary="Replace brand",
)
async def update_brand(
    brand_id: int,
    data: BrandWrite,
    admin: AdminUser,
    service: BrandServiceDep,
) -> BrandResponse:
    brand = await service.update_brand(brand_id, data)
    return BrandResponse(**brand)


@admin_router.delete(
    "/{brand_id}",
    response_model=MessageResponse,
    summary="Delete brand",
)
async def delete_brand(
    brand_id: int,
    admin: AdminUser,
    service: BrandServiceDep,
) -> MessageResponse:
    await service.delete_brand(brand_id)
    return MessageResponse(message="Brand deleted")
