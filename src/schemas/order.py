"""Order Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.order import (
    OrderStatus,
    insurance_from_flag,
    insurance_to_flag,
    parse_insurance_input,
)


class OrderDraft(BaseModel):
    """Order submitted from the public checkout.

    Every field is optional at the schema level; required-field checks
    happen in the checkout workflow so the first missing field can be
    reported by name.
    """

    model_config = ConfigDict(from_attributes=True)

    nome: str | None = Field(default=None, description="Customer full name")
    cpf: str | None = Field(default=None, description="Customer tax id (CPF)")
    email: str | None = Field(default=None, description="Customer email")
    telefone: str | None = Field(default=None, description="Customer phone")
    cep: str | None = Field(default=None, description="Postal code")
    rua: str | None = Field(default=None, description="Street")
    numero: str | None = Field(default=None, description="Street number")
    complemento: str | None = Field(default=None, description="Address complement")
    bairro: str | None = Field(default=None, description="Neighborhood")
    cidade: str | None = Field(default=None, description="City")
    estado: str | None = Field(default=None, description="Two-letter state code")
    metodo_pagamento: str | None = Field(default=None, description="Payment method")
    frete: Decimal | None = Field(default=None, description="Shipping cost")
    total_pedido: Decimal | None = Field(default=None, description="Order total")
    seguro: bool = Field(default=False, description='Insurance, accepts true/false or "sim"/"não"')

    @field_validator("seguro", mode="before")
    @classmethod
    def parse_insurance(cls, value: Any) -> bool:
        return parse_insurance_input(value)

    @field_validator("numero", "cep", "cpf", "telefone", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Any:
        """Accept numbers for fields that are stored as text."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class AdminOrderDraft(OrderDraft):
    """Order created or replaced from the admin panel."""

    status: str | None = Field(default=None, description="Order status, defaults to pendente")


class OrderStatusUpdate(BaseModel):
    """Schema for PATCH /orders/{id}/status."""

    status: str = Field(..., min_length=1, description="New order status")


class OrderResponse(BaseModel):
    """Schema for order API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Order identifier")
    nome: str
    cpf: str
    email: str
    telefone: str
    cep: str
    rua: str
    numero: str
    complemento: str | None = None
    bairro: str
    cidade: str
    estado: str
    metodo_pagamento: str
    frete: Decimal = Field(description="Shipping cost")
    total_pedido: Decimal = Field(description="Order total")
    seguro: str = Field(default="não", description='Insurance flag, "sim" or "não"')
    status: str = Field(default=OrderStatus.PENDING.value, description="Order status")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")

    @field_validator("seguro", mode="before")
    @classmethod
    def normalize_insurance(cls, value: Any) -> str:
        """Rows written before the column existed carry NULL."""
        return insurance_to_flag(insurance_from_flag(value))

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: Any) -> Any:
        """Read NULL as pending and legacy capitalised values in lower case."""
        if value is None:
            return OrderStatus.PENDING.value
        try:
            return OrderStatus.parse(value).value
        except ValueError:
            return value


class OrderListResponse(BaseModel):
    """Schema for order list API responses."""

    model_config = ConfigDict(from_attributes=True)

    items: list[OrderResponse] = Field(description="Orders, newest first")
