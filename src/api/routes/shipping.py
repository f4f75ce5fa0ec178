"""Shipping option API routes."""

from fastapi import APIRouter, Query, status

from src.api.deps import AdminUser, PricingEngineDep, ShippingServiceDep
from src.schemas.common import MessageResponse
from src.schemas.shipping import (
    ShippingOptionListResponse,
    ShippingOptionResponse,
    ShippingOptionWrite,
)
from src.services.pricing_service import PricingEngine, ShippingOption, normalize_state

router = APIRouter(prefix="/shipping-options", tags=["shipping"])


def _to_response(
    option: ShippingOption,
    state: str | None = None,
    engine: PricingEngine | None = None,
) -> ShippingOptionResponse:
    valor = None
    if state is not None and engine is not None:
        valor = option.price_for(state, engine.fallback_state)
    return ShippingOptionResponse(
        id=option.id,
        nome=option.name,
        precos=dict(option.price_table),
        seguro=option.insurance_percentage,
        valor=valor,
    )


@router.get(
    "",
    response_model=ShippingOptionListResponse,
    summary="List shipping options",
    description="Lists shipping options. With ?estado=XX each option also carries its price for that state.",
)
async def list_shipping_options(
    service: ShippingServiceDep,
    engine: PricingEngineDep,
    estado: str | None = Query(default=None, description="Two-letter state code"),
) -> ShippingOptionListResponse:
    """List shipping options, optionally priced for a state.

    Raises:
        InvalidInputError: 422 if the state code is unknown.
    """
    state = normalize_state(estado) if estado is not None else None
    options = await service.list_options()
    return ShippingOptionListResponse(
        items=[_to_response(option, state, engine) for option in options]
    )


admin_router = APIRouter(prefix="/admin/shipping-options", tags=["admin"])


@admin_router.post(
    "",
    response_model=ShippingOptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create shipping option",
)
async def create_shipping_option(
    data: ShippingOptionWrite,
    admin: AdminUser,
    service: ShippingServiceDep,
) -> ShippingOptionResponse:
    option = await service.create_option(data)
    return _to_response(option)


@admin_router.put(
    "/{option_id}",
    response_model=ShippingOptionResponse,
    summary="Replace shipping option",
)
async def update_shipping_option(
    option_id: int,
    data: ShippingOptionWrite,
    admin: AdminUser,
    service: ShippingServiceDep,
) -> ShippingOptionResponse:
    option = await service.update_option(option_id, data)
    return _to_response(option)


@admin_router.delete(
    "/{option_id}",
    response_model=MessageResponse,
    summary="Delete shipping option",
)
async def delete_shipping_option(
    option_id: int,
    admin: AdminUser,
    service: ShippingServiceDep,
) -> MessageResponse:
    await service.delete_option(option_id)
    return MessageResponse(message="Shipping option deleted")
