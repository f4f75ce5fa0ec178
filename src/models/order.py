"""Order model type definitions for database operations."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TypedDict


class OrderStatus(str, Enum):
    """Order status values as stored in the pedidos.status column."""

    PENDING = "pendente"
    CONFIRMED = "confirmado"
    SHIPPED = "enviado"
    DELIVERED = "entregue"
    CANCELLED = "cancelado"

    @classmethod
    def parse(cls, value: "str | OrderStatus") -> "OrderStatus":
        """Parse a stored or submitted status, ignoring case.

        Older rows were written with capitalised values such as "Pendente".

        Raises:
            ValueError: If the value is not a known status.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class PaymentMethod(str, Enum):
    """Payment methods offered at checkout."""

    PIX = "pix"
    CREDIT_CARD = "cartao_credito"
    DEBIT_CARD = "cartao_debito"
    BOLETO = "boleto"
    CASH = "dinheiro"


# Insurance is persisted as a free-text sentinel, not a boolean column
INSURED = "sim"
NOT_INSURED = "não"


def insurance_to_flag(insured: bool) -> str:
    """Translate the insurance toggle into the stored sentinel."""
    return INSURED if insured else NOT_INSURED


def insurance_from_flag(flag: str | bool | None) -> bool:
    """Translate a stored sentinel (or a plain bool) back into the toggle.

    Anything other than "sim" (any case) is treated as not insured,
    including NULL for rows written before the column existed.
    """
    if isinstance(flag, bool):
        return flag
    if flag is None:
        return False
    return str(flag).strip().lower() == INSURED


_INSURED_INPUTS = frozenset({INSURED, "true", "1"})
_NOT_INSURED_INPUTS = frozenset({NOT_INSURED, "nao", "false", "0", ""})


def parse_insurance_input(value: str | bool | int | None) -> bool:
    """Parse a submitted insurance toggle.

    Accepts booleans, the stored sentinels, "true"/"false" and "1"/"0".
    Missing means not insured.

    Raises:
        ValueError: For any other value.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _INSURED_INPUTS:
        return True
    if text in _NOT_INSURED_INPUTS:
        return False
    raise ValueError(f"Unrecognised insurance flag: {value!r}")


class Order(TypedDict):
    """Order table row representation.

    Represents an order stored in the pedidos table.
    Maps directly to the database schema.
    """

    id: int
    nome: str
    cpf: str
    email: str
    telefone: str
    cep: str
    rua: str
    numero: str
    complemento: str | None
    bairro: str
    cidade: str
    estado: str
    metodo_pagamento: str
    frete: Decimal
    total_pedido: Decimal
    seguro: str
    status: str
    created_at: datetime
    updated_at: datetime


class OrderCreate(TypedDict, total=False):
    """Row written when a new order is inserted."""

    nome: str
    cpf: str
    email: str
    telefone: str
    cep: str
    rua: str
    numero: str
    complemento: str | None
    bairro: str
    cidade: str
    estado: str
    metodo_pagamento: str
    frete: str
    total_pedido: str
    seguro: str
    status: str


class OrderUpdate(OrderCreate, total=False):
    """Row written on a full admin update."""

    updated_at: str
