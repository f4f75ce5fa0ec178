"""Checkout quote Pydantic schemas."""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.services.pricing_service import Quote

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    """Round a computed amount to cents for display."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class QuoteLine(BaseModel):
    """A cart line submitted for pricing."""

    product_id: int = Field(description="Product identifier")
    quantity: int = Field(default=1, description="Units of the product")


class QuoteRequest(BaseModel):
    """Schema for POST /checkout/quote.

    Unit prices are read from the catalog, never from the client.
    """

    model_config = ConfigDict(from_attributes=True)

    itens: list[QuoteLine] = Field(..., min_length=1, description="Cart lines")
    estado: str = Field(..., description="Buyer's two-letter state code")
    frete_id: int = Field(..., description="Chosen shipping option")
    seguro: bool = Field(default=False, description="Whether insurance was selected")


class QuoteResponse(BaseModel):
    """Checkout totals rounded to cents."""

    subtotal: Decimal = Field(description="Sum of cart lines")
    frete: Decimal = Field(description="Shipping cost")
    seguro: Decimal = Field(description="Insurance cost")
    total: Decimal = Field(description="Grand total")

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        """Present a quote, rounding each amount to cents."""
        return cls(
            subtotal=to_cents(quote.subtotal),
            frete=to_cents(quote.shipping_cost),
            seguro=to_cents(quote.insurance_cost),
            total=to_cents(quote.total),
        )
