"""Checkout pricing: shipping cost by state, insurance, and totals.

Everything here is pure computation over Decimal values. Nothing is
rounded; presentation code quantizes to cents when rendering a quote.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from src.api.middleware.error_handler import InvalidInputError
from src.core.config import get_settings
from src.models.shipping import STATE_CODES
from src.services.cart_service import Cart, CartLine

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Any, name: str) -> Decimal:
    """Convert a price-like value to Decimal without going through float.

    Raises:
        InvalidInputError: If the value is not numeric.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidInputError(f"{name} must be numeric") from e
    if not result.is_finite():
        raise InvalidInputError(f"{name} must be numeric")
    return result


def normalize_state(state: str | None) -> str:
    """Upper-case and validate a two-letter state code.

    Raises:
        InvalidInputError: If the code is not a Brazilian state.
    """
    code = (state or "").strip().upper()
    if code not in STATE_CODES:
        raise InvalidInputError(f"Unknown state code: {state!r}")
    return code


@dataclass(frozen=True)
class ShippingOption:
    """A named shipping service with per-state prices.

    Attributes:
        id: Store identifier.
        name: Display name, e.g. "PAC" or "Sedex".
        price_table: State code -> price. States may be missing.
        insurance_percentage: Percentage of the subtotal charged for insurance.
    """

    id: int | None
    name: str
    price_table: Mapping[str, Decimal] = field(default_factory=dict)
    insurance_percentage: Decimal = ZERO

    def price_for(self, state: str, fallback_state: str) -> Decimal | None:
        """Return the price for a state, falling back to another state's price.

        Returns None when neither state has a price.
        """
        if state in self.price_table:
            return self.price_table[state]
        return self.price_table.get(fallback_state)


@dataclass(frozen=True)
class Quote:
    """Derived checkout totals for one cart/state/option combination."""

    subtotal: Decimal
    shipping_cost: Decimal
    insurance_cost: Decimal
    total: Decimal


class PricingEngine:
    """Computes checkout quotes.

    The fallback state is used for options that carry no price for the
    buyer's state. It comes from settings unless given explicitly.
    """

    def __init__(self, fallback_state: str | None = None) -> None:
        """Initialize the engine.

        Args:
            fallback_state: State whose price stands in for missing entries.
        """
        if fallback_state is None:
            fallback_state = get_settings().default_shipping_state
        self.fallback_state = normalize_state(fallback_state)

    def quote(
        self,
        subtotal: Decimal | int | str,
        state: str,
        shipping_option: ShippingOption,
        insurance_enabled: bool,
    ) -> Quote:
        """Price a checkout.

        Args:
            subtotal: Cart subtotal, must not be negative.
            state: Buyer's two-letter state code.
            shipping_option: Chosen shipping service.
            insurance_enabled: Whether the buyer opted into insurance.

        Returns:
            Quote: Subtotal, shipping, insurance and grand total.

        Raises:
            InvalidInputError: If the subtotal is negative, the state is
                unknown, the option has no price for the state or the fallback
                state, or its insurance percentage is outside 0-100.
        """
        amount = to_decimal(subtotal, "subtotal")
        if amount < ZERO:
            raise InvalidInputError("subtotal must not be negative")

        code = normalize_state(state)

        percentage = to_decimal(shipping_option.insurance_percentage, "insurance_percentage")
        if percentage < ZERO or percentage > HUNDRED:
            raise InvalidInputError("insurance_percentage must be between 0 and 100")

        shipping_cost = shipping_option.price_for(code, self.fallback_state)
        if shipping_cost is None:
            raise InvalidInputError(
                f"No shipping price for {code} in option {shipping_option.name!r}"
            )
        insurance_cost = amount * percentage / HUNDRED if insurance_enabled else ZERO

        return Quote(
            subtotal=amount,
            shipping_cost=shipping_cost,
            insurance_cost=insurance_cost,
            total=amount + shipping_cost + insurance_cost,
        )

    def quote_cart(
        self,
        lines: Iterable[CartLine],
        state: str,
        shipping_option: ShippingOption,
        insurance_enabled: bool,
    ) -> Quote:
        """Price a checkout from cart lines.

        Raises:
            InvalidInputError: If any line has a quantity below 1 or a
                negative unit price, plus everything ``quote`` rejects.
        """
        cart = Cart()
        for line in lines:
            if line.quantity < 1:
                raise InvalidInputError(
                    f"quantity must be at least 1 for product {line.product_id}"
                )
            unit_price = to_decimal(line.unit_price, "unit_price")
            if unit_price < ZERO:
                raise InvalidInputError(
                    f"unit_price must not be negative for product {line.product_id}"
                )
            cart.add(line.product_id, unit_price, line.quantity, name=line.name)

        return self.quote(cart.subtotal(), state, shipping_option, insurance_enabled)


def get_pricing_engine() -> PricingEngine:
    """Build a pricing engine configured from settings."""
    return PricingEngine()
