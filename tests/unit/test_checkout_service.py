"""Unit tests for the order submission workflow."""

from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.api.middleware.error_handler import NotFoundError, PersistenceError, ValidationError
from src.schemas.order import AdminOrderDraft, OrderDraft
from src.services.checkout_service import REQUIRED_FIELDS, CheckoutService, build_order_row


class TestBuildOrderRow:
    """Tests for build_order_row."""

    def test_builds_row(self, valid_draft: dict[str, Any]) -> None:
        row = build_order_row(valid_draft)

        assert row["nome"] == "Maria Souza"
        assert row["frete"] == "15.00"
        assert row["total_pedido"] == "116.80"
        assert row["seguro"] == "sim"
        assert "status" not in row

    def test_accepts_pydantic_draft(self, valid_draft: dict[str, Any]) -> None:
        row = build_order_row(OrderDraft(**valid_draft))

        assert row["seguro"] == "sim"
        assert Decimal(row["frete"]) == Decimal("15.00")

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_missing_required_field(self, valid_draft: dict[str, Any], field: str) -> None:
        del valid_draft[field]

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == field

    def test_blank_field_counts_as_missing(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["email"] = "   "

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "email"

    def test_reports_first_missing_field(self, valid_draft: dict[str, Any]) -> None:
        del valid_draft["cidade"]
        del valid_draft["cpf"]

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "cpf"

    @pytest.mark.parametrize("field", ["frete", "total_pedido"])
    def test_missing_amount(self, valid_draft: dict[str, Any], field: str) -> None:
        del valid_draft[field]

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == field

    def test_non_numeric_amount(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["frete"] = "quinze"

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "frete"

    def test_negative_amount(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["total_pedido"] = "-1"

        with pytest.raises(ValidationError):
            build_order_row(valid_draft)

    def test_zero_shipping_allowed(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["frete"] = 0

        assert build_order_row(valid_draft)["frete"] == "0"

    def test_state_upper_cased(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["estado"] = "rj"

        assert build_order_row(valid_draft)["estado"] == "RJ"

    def test_unknown_state(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["estado"] = "ZZ"

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "estado"

    def test_unknown_payment_method(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["metodo_pagamento"] = "bitcoin"

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "metodo_pagamento"

    def test_blank_complement_stored_as_null(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["complemento"] = "  "

        assert build_order_row(valid_draft)["complemento"] is None

    def test_insurance_off(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["seguro"] = False

        assert build_order_row(valid_draft)["seguro"] == "não"

    @pytest.mark.parametrize("flag", ["true", "1", "SIM", True])
    def test_insurance_on_spellings(self, valid_draft: dict[str, Any], flag: Any) -> None:
        valid_draft["seguro"] = flag

        assert build_order_row(valid_draft)["seguro"] == "sim"

    def test_missing_insurance_is_off(self, valid_draft: dict[str, Any]) -> None:
        del valid_draft["seguro"]

        assert build_order_row(valid_draft)["seguro"] == "não"

    def test_unrecognised_insurance_flag(self, valid_draft: dict[str, Any]) -> None:
        valid_draft["seguro"] = "talvez"

        with pytest.raises(ValidationError) as exc_info:
            build_order_row(valid_draft)

        assert exc_info.value.field == "seguro"

    def test_draft_schema_reads_true_string(self) -> None:
        assert OrderDraft(seguro="true").seguro is True
        assert OrderDraft(seguro="false").seguro is False


class TestSubmitOrder:
    """Tests for CheckoutService.submit_order."""

    @pytest.mark.asyncio
    async def test_submit_then_get(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)

        order_id, order = await service.submit_order(valid_draft)
        fetched = await service.get_order(order_id)

        assert fetched["status"] == "pendente"
        assert fetched["email"] == "maria@example.com"
        assert fetched["id"] == order["id"] == order_id
        assert order_store.writes == 1

    @pytest.mark.asyncio
    async def test_public_submission_ignores_status(
        self, order_store, valid_draft: dict[str, Any]
    ) -> None:
        service = CheckoutService(order_store=order_store)

        _, order = await service.submit_order({**valid_draft, "status": "entregue"})

        assert order["status"] == "pendente"

    @pytest.mark.asyncio
    async def test_admin_submission_honours_status(
        self, order_store, valid_draft: dict[str, Any]
    ) -> None:
        service = CheckoutService(order_store=order_store)
        draft = AdminOrderDraft(**valid_draft, status="Confirmado")

        _, order = await service.submit_order(draft, allow_status=True)

        assert order["status"] == "confirmado"

    @pytest.mark.asyncio
    async def test_validation_failure_does_not_write(self, valid_draft: dict[str, Any]) -> None:
        store = MagicMock()
        store.create = AsyncMock()
        service = CheckoutService(order_store=store)
        del valid_draft["email"]

        with pytest.raises(ValidationError) as exc_info:
            await service.submit_order(valid_draft)

        assert exc_info.value.field == "email"
        store.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, valid_draft: dict[str, Any]) -> None:
        store = MagicMock()
        store.create = AsyncMock(side_effect=PersistenceError("Failed to create order"))
        service = CheckoutService(order_store=store)

        with pytest.raises(PersistenceError):
            await service.submit_order(valid_draft)

        store.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)

        first, _ = await service.submit_order(valid_draft)
        second, _ = await service.submit_order(valid_draft)

        assert first != second


class TestUpdateStatus:
    """Tests for CheckoutService.update_status."""

    @pytest.mark.asyncio
    async def test_changes_status(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)

        updated = await service.update_status(order_id, "ENVIADO")

        assert updated["status"] == "enviado"
        assert updated["nome"] == valid_draft["nome"]

    @pytest.mark.asyncio
    async def test_unknown_order(self, order_store) -> None:
        service = CheckoutService(order_store=order_store)

        with pytest.raises(NotFoundError):
            await service.update_status(999, "confirmado")

    @pytest.mark.asyncio
    async def test_unknown_status(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)

        with pytest.raises(ValidationError) as exc_info:
            await service.update_status(order_id, "perdido")

        assert exc_info.value.field == "status"
        assert (await service.get_order(order_id))["status"] == "pendente"


class TestUpdateOrder:
    """Tests for CheckoutService.update_order."""

    @pytest.mark.asyncio
    async def test_keeps_status_when_omitted(
        self, order_store, valid_draft: dict[str, Any]
    ) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)
        await service.update_status(order_id, "confirmado")

        updated = await service.update_order(order_id, {**valid_draft, "cidade": "Campinas"})

        assert updated["cidade"] == "Campinas"
        assert updated["status"] == "confirmado"

    @pytest.mark.asyncio
    async def test_sets_status(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)

        updated = await service.update_order(order_id, {**valid_draft, "status": "cancelado"})

        assert updated["status"] == "cancelado"

    @pytest.mark.asyncio
    async def test_invalid_draft(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)

        with pytest.raises(ValidationError):
            await service.update_order(order_id, {**valid_draft, "nome": ""})

    @pytest.mark.asyncio
    async def test_delete_then_get(self, order_store, valid_draft: dict[str, Any]) -> None:
        service = CheckoutService(order_store=order_store)
        order_id, _ = await service.submit_order(valid_draft)

        await service.delete_order(order_id)

        with pytest.raises(NotFoundError):
            await service.get_order(order_id)
        assert await service.list_orders() == []
