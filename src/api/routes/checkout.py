"""Checkout API routes: quotes and postal code lookup."""

from fastapi import APIRouter

from src.api.deps import (
    AddressServiceDep,
    PricingEngineDep,
    ProductServiceDep,
    ShippingServiceDep,
)
from src.api.middleware.error_handler import NotFoundError
from src.schemas.address import AddressResponse
from src.schemas.checkout import QuoteRequest, QuoteResponse
from src.services.cart_service import CartLine
from src.services.pricing_service import to_decimal

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post(
    "/quote",
    response_model=QuoteResponse,
    summary="Price a cart",
    description="Computes subtotal, shipping, insurance and total for a cart, state and shipping option.",
)
async def quote_checkout(
    data: QuoteRequest,
    products: ProductServiceDep,
    shipping: ShippingServiceDep,
    engine: PricingEngineDep,
) -> QuoteResponse:
    """Price a cart with catalog prices.

    Args:
        data: Cart lines, state, shipping option and insurance toggle.

    Returns:
        QuoteResponse: Amounts rounded to cents.

    Raises:
        NotFoundError: 404 if a product or the shipping option does not exist.
        InvalidInputError: 422 for a quantity below 1 or an unknown state.
    """
    catalog = await products.get_products([line.product_id for line in data.itens])

    lines: list[CartLine] = []
    for item in data.itens:
        product = catalog.get(item.product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {item.product_id}")
        lines.append(
            CartLine(
                product_id=item.product_id,
                unit_price=to_decimal(product["preco"], "preco"),
                quantity=item.quantity,
                name=product.get("nome"),
            )
        )

    option = await shipping.get_option(data.frete_id)
    quote = engine.quote_cart(lines, data.estado, option, data.seguro)
    return QuoteResponse.from_quote(quote)


address_router = APIRouter(prefix="/address", tags=["checkout"])


@address_router.get(
    "/{cep}",
    response_model=AddressResponse,
    summary="Resolve postal code",
)
async def resolve_address(cep: str, service: AddressServiceDep) -> AddressResponse:
    """Resolve a CEP to a structured address.

    Raises:
        ValidationError: 422 if the CEP is not 8 digits.
        NotFoundError: 404 if the CEP does not exist.
        AddressLookupError: 502 if the lookup service fails.
    """
    return await service.resolve(cep)
