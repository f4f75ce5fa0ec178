"""Shipping option Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ShippingOptionWrite(BaseModel):
    """Schema for creating or replacing a shipping option."""

    model_config = ConfigDict(from_attributes=True)

    nome: str = Field(..., min_length=1, max_length=100, description="Display name")
    precos: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Price per two-letter state code; missing states fall back to the default state",
    )
    seguro: Decimal = Field(default=Decimal("0"), ge=0, le=100, description="Insurance percentage")

    @field_validator("precos", mode="before")
    @classmethod
    def upper_case_states(cls, value: object) -> object:
        if isinstance(value, dict):
            return {str(k).strip().upper(): v for k, v in value.items()}
        return value


class ShippingOptionResponse(BaseModel):
    """Schema for shipping option API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Shipping option identifier")
    nome: str = Field(description="Display name")
    precos: dict[str, Decimal] = Field(description="Price per state code")
    seguro: Decimal = Field(description="Insurance percentage")
    valor: Decimal | None = Field(
        default=None,
        description="Price for the requested state; null when no state was given or the option has no price for it",
    )


class ShippingOptionListResponse(BaseModel):
    """Schema for shipping option list responses."""

    items: list[ShippingOptionResponse] = Field(description="Shipping options ordered by name")
