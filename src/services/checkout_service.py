"""Order submission workflow: validation, persistence, status changes."""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel

from src.api.middleware.error_handler import ValidationError
from src.models.order import (
    Order,
    OrderCreate,
    OrderStatus,
    PaymentMethod,
    insurance_to_flag,
    parse_insurance_input,
)
from src.models.shipping import STATE_CODES
from src.services.order_service import OrderService

logger = logging.getLogger(__name__)

# Checked in this order; the first empty one is reported
REQUIRED_FIELDS: tuple[str, ...] = (
    "nome",
    "cpf",
    "email",
    "telefone",
    "cep",
    "rua",
    "numero",
    "bairro",
    "cidade",
    "estado",
    "metodo_pagamento",
)

AMOUNT_FIELDS: tuple[str, ...] = ("total_pedido", "frete")


def _as_mapping(draft: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(draft, BaseModel):
        return draft.model_dump()
    return draft


def _required_text(draft: Mapping[str, Any], name: str) -> str:
    value = draft.get(name)
    if value is None:
        raise ValidationError(f"Missing required field: {name}", field=name)
    text = str(value).strip()
    if not text:
        raise ValidationError(f"Missing required field: {name}", field=name)
    return text


def _amount(draft: Mapping[str, Any], name: str) -> Decimal:
    value = draft.get(name)
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {name}", field=name)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Field {name} must be numeric", field=name) from e
    if not amount.is_finite():
        raise ValidationError(f"Field {name} must be numeric", field=name)
    if amount < 0:
        raise ValidationError(f"Field {name} must not be negative", field=name)
    return amount


def _status(value: Any) -> OrderStatus:
    try:
        return OrderStatus.parse(value)
    except ValueError as e:
        raise ValidationError(f"Unknown order status: {value}", field="status") from e


def build_order_row(draft: Mapping[str, Any] | BaseModel) -> OrderCreate:
    """Validate a draft and turn it into a pedidos row.

    Status is not part of the result; callers decide it.

    Raises:
        ValidationError: Naming the first missing or invalid field.
    """
    data = _as_mapping(draft)
    values = {name: _required_text(data, name) for name in REQUIRED_FIELDS}

    estado = values["estado"].upper()
    if estado not in STATE_CODES:
        raise ValidationError(f"Unknown state code: {values['estado']}", field="estado")
    values["estado"] = estado

    metodo = values["metodo_pagamento"].lower()
    try:
        values["metodo_pagamento"] = PaymentMethod(metodo).value
    except ValueError as e:
        raise ValidationError(
            f"Unknown payment method: {values['metodo_pagamento']}",
            field="metodo_pagamento",
        ) from e

    amounts = {name: _amount(data, name) for name in AMOUNT_FIELDS}

    try:
        insured = parse_insurance_input(data.get("seguro"))
    except ValueError as e:
        raise ValidationError(str(e), field="seguro") from e

    complemento = data.get("complemento")
    if isinstance(complemento, str):
        complemento = complemento.strip() or None

    row: OrderCreate = {
        **values,
        "complemento": complemento,
        # Decimals go over the wire as strings; Postgres casts them to numeric
        "frete": str(amounts["frete"]),
        "total_pedido": str(amounts["total_pedido"]),
        "seguro": insurance_to_flag(insured),
    }
    return row


class CheckoutService:
    """Orchestrates order validation and persistence.

    Validation always completes before the store is touched, and each
    successful call performs exactly one write. Failures are not retried.
    """

    def __init__(self, order_store: OrderService | None = None) -> None:
        """Initialize checkout workflow.

        Args:
            order_store: Optional order store for testing.
        """
        self._order_store = order_store

    @property
    def order_store(self) -> OrderService:
        """Get order store."""
        if self._order_store is None:
            self._order_store = OrderService()
        return self._order_store

    async def submit_order(
        self,
        draft: Mapping[str, Any] | BaseModel,
        *,
        allow_status: bool = False,
    ) -> tuple[int, Order]:
        """Validate and persist a new order.

        Args:
            draft: Order fields as submitted.
            allow_status: Honour a ``status`` in the draft (admin creation).
                Public submissions are always created as pending.

        Returns:
            tuple: The new order id and the persisted order.

        Raises:
            ValidationError: If a required field is missing or invalid.
            PersistenceError: If the store write fails.
        """
        row = build_order_row(draft)

        status = OrderStatus.PENDING
        if allow_status:
            requested = _as_mapping(draft).get("status")
            if requested:
                status = _status(requested)
        row["status"] = status.value

        order = await self.order_store.create(row)
        logger.info("Order %s submitted with status %s", order["id"], status.value)
        return order["id"], order

    async def update_status(self, order_id: int, new_status: str | OrderStatus) -> Order:
        """Change the status of an existing order.

        Raises:
            ValidationError: If the status is unknown.
            NotFoundError: If the order does not exist.
        """
        status = _status(new_status)
        return await self.order_store.patch_status(order_id, status)

    async def update_order(self, order_id: int, draft: Mapping[str, Any] | BaseModel) -> Order:
        """Replace an order's fields from the admin panel.

        A missing status leaves the current status untouched.

        Raises:
            ValidationError: If a required field is missing or invalid.
            NotFoundError: If the order does not exist.
        """
        row = build_order_row(draft)
        requested = _as_mapping(draft).get("status")
        if requested:
            row["status"] = _status(requested).value
        return await self.order_store.update(order_id, row)

    async def get_order(self, order_id: int) -> Order:
        """Get an order by id, raising NotFoundError when missing."""
        return await self.order_store.get(order_id)

    async def list_orders(self) -> list[Order]:
        return await self.order_store.list_all()

    async def delete_order(self, order_id: int) -> Order:
        return await self.order_store.delete(order_id)
