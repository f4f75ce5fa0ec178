"""Integration tests for checkout quote and address endpoints."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_address_service, get_product_service, get_shipping_service
from src.api.middleware.error_handler import AddressLookupError, NotFoundError
from src.main import app
from src.schemas.address import AddressResponse
from src.services.pricing_service import ShippingOption

PAC = ShippingOption(
    id=1,
    name="PAC",
    price_table={"SP": Decimal("15.00"), "RJ": Decimal("22.50")},
    insurance_percentage=Decimal("1.8"),
)


@pytest.fixture
def product_service() -> MagicMock:
    service = MagicMock()
    service.get_products = AsyncMock(
        return_value={
            1: {"id": 1, "nome": "Dipirona", "preco": "25.00"},
            2: {"id": 2, "nome": "Vitamina C", "preco": 50.0},
        }
    )
    return service


@pytest.fixture
def shipping_service() -> MagicMock:
    service = MagicMock()
    service.get_option = AsyncMock(return_value=PAC)
    return service


@pytest.fixture
def checkout_client(
    client: TestClient, product_service: MagicMock, shipping_service: MagicMock
) -> TestClient:
    app.dependency_overrides[get_product_service] = lambda: product_service
    app.dependency_overrides[get_shipping_service] = lambda: shipping_service
    return client


class TestQuote:
    """Tests for POST /api/v1/checkout/quote."""

    def test_quote_with_insurance(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={
                "itens": [{"product_id": 1, "quantity": 2}, {"product_id": 2}],
                "estado": "sp",
                "frete_id": 1,
                "seguro": True,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["subtotal"]) == Decimal("100.00")
        assert Decimal(data["frete"]) == Decimal("15.00")
        assert Decimal(data["seguro"]) == Decimal("1.80")
        assert Decimal(data["total"]) == Decimal("116.80")

    def test_state_without_price_uses_fallback(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 1}], "estado": "BA", "frete_id": 1},
        )

        data = response.json()
        assert Decimal(data["frete"]) == Decimal("15.00")
        assert Decimal(data["seguro"]) == Decimal("0")

    def test_unknown_product(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 99}], "estado": "SP", "frete_id": 1},
        )

        assert response.status_code == 404

    def test_unknown_shipping_option(
        self, checkout_client: TestClient, shipping_service: MagicMock
    ) -> None:
        shipping_service.get_option.side_effect = NotFoundError("Shipping option not found")

        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 1}], "estado": "SP", "frete_id": 9},
        )

        assert response.status_code == 404

    def test_zero_quantity(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 1, "quantity": 0}], "estado": "SP", "frete_id": 1},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "invalid_input"

    def test_unknown_state(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 1}], "estado": "XX", "frete_id": 1},
        )

        assert response.status_code == 422

    def test_option_without_price_for_state(
        self, checkout_client: TestClient, shipping_service: MagicMock
    ) -> None:
        shipping_service.get_option.return_value = ShippingOption(
            id=2, name="Sedex", price_table={"RJ": Decimal("40.00")}
        )

        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [{"product_id": 1}], "estado": "AM", "frete_id": 2},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "invalid_input"

    def test_empty_cart_rejected(self, checkout_client: TestClient) -> None:
        response = checkout_client.post(
            "/api/v1/checkout/quote",
            json={"itens": [], "estado": "SP", "frete_id": 1},
        )

        assert response.status_code == 422


class TestAddressLookup:
    """Tests for GET /api/v1/address/{cep}."""

    @pytest.fixture
    def address_service(self) -> MagicMock:
        service = MagicMock()
        service.resolve = AsyncMock(
            return_value=AddressResponse(
                cep="01310100",
                rua="Avenida Paulista",
                bairro="Bela Vista",
                cidade="São Paulo",
                estado="SP",
            )
        )
        app.dependency_overrides[get_address_service] = lambda: service
        return service

    def test_resolves(self, client: TestClient, address_service: MagicMock) -> None:
        response = client.get("/api/v1/address/01310-100")

        assert response.status_code == 200
        assert response.json()["cidade"] == "São Paulo"
        address_service.resolve.assert_awaited_once_with("01310-100")

    def test_lookup_failure(self, client: TestClient, address_service: MagicMock) -> None:
        address_service.resolve.side_effect = AddressLookupError()

        response = client.get("/api/v1/address/01310100")

        assert response.status_code == 502
