"""Order API routes: public checkout submission and admin management."""

from fastapi import APIRouter, status

from src.api.deps import AdminUser, CheckoutServiceDep
from src.schemas.common import MessageResponse
from src.schemas.order import (
    AdminOrderDraft,
    OrderDraft,
    OrderListResponse,
    OrderResponse,
    OrderStatusUpdate,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit order",
    description="Creates an order from the public checkout. The order always starts as pendente.",
)
async def submit_order(data: OrderDraft, service: CheckoutServiceDep) -> OrderResponse:
    """Submit a checkout order.

    Args:
        data: Customer, address, payment and totals.
        service: Checkout workflow.

    Returns:
        OrderResponse: The created order including its id.

    Raises:
        ValidationError: 422 naming the first missing or invalid field.
        PersistenceError: 503 if the order could not be stored.
    """
    _, order = await service.submit_order(data)
    return OrderResponse(**order)


@router.get(
    "",
    response_model=OrderListResponse,
    summary="List orders",
    description="Returns every order, newest first.",
)
async def list_orders(admin: AdminUser, service: CheckoutServiceDep) -> OrderListResponse:
    orders = await service.list_orders()
    return OrderListResponse(items=[OrderResponse(**order) for order in orders])


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order by ID",
)
async def get_order(order_id: int, admin: AdminUser, service: CheckoutServiceDep) -> OrderResponse:
    """Get a single order.

    Raises:
        NotFoundError: 404 if the order does not exist.
    """
    order = await service.get_order(order_id)
    return OrderResponse(**order)


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Replace order",
    description="Replaces every editable field of an order. Omitting status keeps the current one.",
)
async def update_order(
    order_id: int,
    data: AdminOrderDraft,
    admin: AdminUser,
    service: CheckoutServiceDep,
) -> OrderResponse:
    order = await service.update_order(order_id, data)
    return OrderResponse(**order)


@router.patch(
    "/{order_id}/status",
    response_model=OrderResponse,
    summary="Change order status",
)
async def update_order_status(
    order_id: int,
    data: OrderStatusUpdate,
    admin: AdminUser,
    service: CheckoutServiceDep,
) -> OrderResponse:
    """Change only the status of an order.

    Raises:
        ValidationError: 422 if the status is unknown.
        NotFoundError: 404 if the order does not exist.
    """
    order = await service.update_status(order_id, data.status)
    return OrderResponse(**order)


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    summary="Delete order",
)
async def delete_order(order_id: int, admin: AdminUser, service: CheckoutServiceDep) -> MessageResponse:
    await service.delete_order(order_id)
    return MessageResponse(message="Order deleted")


# Admin creation - mounted separately at /admin/orders
admin_router = APIRouter(prefix="/admin/orders", tags=["admin"])


@admin_router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create order (admin)",
    description="Creates an order from the admin panel. Status may be set explicitly.",
)
async def create_order(
    data: AdminOrderDraft,
    admin: AdminUser,
    service: CheckoutServiceDep,
) -> OrderResponse:
    _, order = await service.submit_order(data, allow_status=True)
    return OrderResponse(**order)
