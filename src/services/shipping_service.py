"""Shipping rate catalog backed by the frete table."""

import logging
from decimal import Decimal
from typing import Any

from supabase import Client

from src.api.middleware.error_handler import NotFoundError, PersistenceError, ValidationError
from src.core.supabase import get_supabase_client, run_query, utc_timestamp
from src.models.shipping import STATE_CODES, STATE_COLUMNS, ShippingRow
from src.schemas.shipping import ShippingOptionWrite
from src.services.pricing_service import ShippingOption

logger = logging.getLogger(__name__)

TABLE = "frete"


def option_from_row(row: ShippingRow | dict[str, Any]) -> ShippingOption:
    """Build a ShippingOption from a frete row.

    NULL state columns are left out of the price table.
    """
    price_table = {
        state: Decimal(str(row[column]))
        for state, column in STATE_COLUMNS.items()
        if row.get(column) is not None
    }
    insurance = row.get("seguro")
    return ShippingOption(
        id=row.get("id"),
        name=row.get("nome") or "",
        price_table=price_table,
        insurance_percentage=Decimal(str(insurance)) if insurance is not None else Decimal("0"),
    )


def option_to_row(data: ShippingOptionWrite) -> dict[str, Any]:
    """Build a frete row from a write schema.

    Raises:
        ValidationError: If a state code is unknown or a price is negative.
    """
    row: dict[str, Any] = {"nome": data.nome.strip(), "seguro": str(data.seguro)}
    for state, price in data.precos.items():
        if state not in STATE_CODES:
            raise ValidationError(f"Unknown state code: {state}", field=f"precos.{state}")
        if price < 0:
            raise ValidationError(f"Price for {state} must not be negative", field=f"precos.{state}")
    for state, column in STATE_COLUMNS.items():
        price = data.precos.get(state)
        row[column] = str(price) if price is not None else None
    return row


class ShippingService:
    """Service for shipping option listing and admin CRUD."""

    def __init__(self, supabase_client: Client | None = None) -> None:
        """Initialize shipping service.

        Args:
            supabase_client: Optional Supabase client for testing.
        """
        self._supabase_client = supabase_client

    @property
    def supabase(self) -> Client:
        """Get Supabase client."""
        if self._supabase_client is None:
            self._supabase_client = get_supabase_client()
        return self._supabase_client

    async def list_options(self) -> list[ShippingOption]:
        """List shipping options ordered by name."""
        rows = run_query(
            self.supabase.table(TABLE).select("*").order("nome"),
            "list shipping options",
        )
        return [option_from_row(row) for row in rows]

    async def get_option(self, option_id: int) -> ShippingOption:
        """Get a shipping option by ID.

        Raises:
            NotFoundError: If no option has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).select("*").eq("id", option_id),
            "fetch shipping option",
        )
        if not rows:
            raise NotFoundError("Shipping option not found")
        return option_from_row(rows[0])

    async def create_option(self, data: ShippingOptionWrite) -> ShippingOption:
        """Create a shipping option."""
        rows = run_query(
            self.supabase.table(TABLE).insert(option_to_row(data)),
            "create shipping option",
        )
        if not rows:
            raise PersistenceError("Failed to create shipping option")

        logger.info("Created shipping option %s", rows[0]["id"])
        return option_from_row(rows[0])

    async def update_option(self, option_id: int, data: ShippingOptionWrite) -> ShippingOption:
        """Replace a shipping option's name, prices and insurance percentage.

        Raises:
            NotFoundError: If no option has this id.
        """
        row = option_to_row(data)
        row["updated_at"] = utc_timestamp()
        rows = run_query(
            self.supabase.table(TABLE).update(row).eq("id", option_id),
            "update shipping option",
        )
        if not rows:
            raise NotFoundError("Shipping option not found")

        logger.info("Updated shipping option %s", option_id)
        return option_from_row(rows[0])

    async def delete_option(self, option_id: int) -> None:
        """Delete a shipping option.

        Raises:
            NotFoundError: If no option has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).delete().eq("id", option_id),
            "delete shipping option",
        )
        if not rows:
            raise NotFoundError("Shipping option not found")

        logger.info("Deleted shipping option %s", option_id)
