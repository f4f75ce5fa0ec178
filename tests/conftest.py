"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_JWT_SECRET", "test-admin-jwt-secret-with-enough-length")
os.environ.setdefault("DEFAULT_SHIPPING_STATE", "SP")

from src.api.middleware.error_handler import NotFoundError  # noqa: E402
from src.models.order import OrderStatus  # noqa: E402


class InMemoryOrderStore:
    """Order store double keeping rows in a dict.

    Mirrors OrderService: assigns ids and timestamps, raises NotFoundError
    for unknown ids, and counts writes.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.writes = 0
        self._next_id = 1

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        self.writes += 1
        now = self._now()
        row = {**data, "id": self._next_id, "created_at": now, "updated_at": now}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    async def get(self, order_id: int) -> dict[str, Any]:
        if order_id not in self.rows:
            raise NotFoundError("Order not found")
        return dict(self.rows[order_id])

    async def list_all(self) -> list[dict[str, Any]]:
        return [dict(row) for row in sorted(self.rows.values(), key=lambda r: r["id"], reverse=True)]

    async def update(self, order_id: int, data: dict[str, Any]) -> dict[str, Any]:
        if order_id not in self.rows:
            raise NotFoundError("Order not found")
        self.writes += 1
        self.rows[order_id].update(data, updated_at=self._now())
        return dict(self.rows[order_id])

    async def patch_status(self, order_id: int, status: OrderStatus) -> dict[str, Any]:
        return await self.update(order_id, {"status": status.value})

    async def delete(self, order_id: int) -> dict[str, Any]:
        if order_id not in self.rows:
            raise NotFoundError("Order not found")
        self.writes += 1
        return self.rows.pop(order_id)


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    """Provide an empty in-memory order store."""
    return InMemoryOrderStore()


@pytest.fixture
def valid_draft() -> dict[str, Any]:
    """A complete public checkout submission."""
    return {
        "nome": "Maria Souza",
        "cpf": "123.456.789-09",
        "email": "maria@example.com",
        "telefone": "(11) 98888-7777",
        "cep": "01310-100",
        "rua": "Avenida Paulista",
        "numero": "1000",
        "complemento": "Apto 12",
        "bairro": "Bela Vista",
        "cidade": "São Paulo",
        "estado": "SP",
        "metodo_pagamento": "pix",
        "frete": "15.00",
        "total_pedido": "116.80",
        "seguro": True,
    }


@pytest.fixture
def mock_supabase_client() -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )

    with patch("src.core.supabase.get_supabase_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def admin_token() -> str:
    """A valid admin bearer token."""
    from src.api.middleware.auth import create_admin_token

    return create_admin_token(7, username="gerente")


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    """Authorization header for admin routes."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def client(mock_supabase_client: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application.

    Dependency overrides set by a test are cleared afterwards.

    Args:
        mock_supabase_client: Mocked Supabase client fixture.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
