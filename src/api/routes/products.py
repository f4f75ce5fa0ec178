"""Product API routes."""

from fastapi import APIRouter, status

from src.api.deps import AdminUser, ProductServiceDep
from src.schemas.common import MessageResponse
from src.schemas.product import ProductListResponse, ProductResponse, ProductWrite

router = APIRouter(prefix="/products", tags=["catalog"])


def _to_list(rows: list) -> ProductListResponse:
    return ProductListResponse(items=[ProductResponse(**row) for row in rows])


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="Lists every product with its category and brand, grouped by brand and cheapest first.",
)
async def list_products(service: ProductServiceDep) -> ProductListResponse:
    return _to_list(await service.list_products())


@router.get(
    "/category/{category_id}",
    response_model=ProductListResponse,
    summary="List products in a category",
)
async def list_products_by_category(
    category_id: int,
    service: ProductServiceDep,
) -> ProductListResponse:
    return _to_list(await service.list_by_category(category_id))


@router.get(
    "/brand/{brand_id}",
    response_model=ProductListResponse,
    summary="List products of a brand",
)
async def list_products_by_brand(
    brand_id: int,
    service: ProductServiceDep,
) -> ProductListResponse:
    return _to_list(await service.list_by_brand(brand_id))


admin_router = APIRouter(prefix="/admin/products", tags=["admin"])


@admin_router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
async def create_product(
    data: ProductWrite,
    admin: AdminUser,
    service: ProductServiceDep,
) -> ProductResponse:
    product = await service.create_product(data)
    return ProductResponse(**product)


@admin_router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Replace product",
)
async def update_product(
    product_id: int,
    data: ProductWrite,
    admin: AdminUser,
    service: ProductServiceDep,
) -> ProductResponse:
    product = await service.update_product(product_id, data)
    return ProductResponse(**product)


@admin_router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete product",
)
async def delete_product(
    product_id: int,
    admin: AdminUser,
    service: ProductServiceDep,
) -> MessageResponse:
    await service.delete_product(product_id)
    return MessageResponse(message="Product deleted")
