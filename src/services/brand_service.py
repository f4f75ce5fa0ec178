"""Brand service for brand CRUD and storefront ordering."""

import logging

from supabase import Client

from src.api.middleware.error_handler import NotFoundError, PersistenceError, ValidationError
from src.core.supabase import get_supabase_client, run_query, utc_timestamp
from src.models.brand import Brand
from src.schemas.brand import BrandWrite

logger = logging.getLogger(__name__)

TABLE = "marcas"


class BrandService:
    """Service for brand operations."""

    def __init__(self, supabase_client: Client | None = None) -> None:
        self._supabase_client = supabase_client

    @property
    def supabase(self) -> Client:
        """Get Supabase client."""
        if self._supabase_client is None:
            self._supabase_client = get_supabase_client()
        return self._supabase_client

    async def list_brands(self) -> list[Brand]:
        """List brands in display order.

        Brands that were never positioned sort last, then by name.
        """
        return run_query(
            self.supabase.table(TABLE)
            .select("*")
            .order("ordem")
            .order("nome"),
            "list brands",
        )

    async def create_brand(self, data: BrandWrite) -> Brand:
        rows = run_query(
            self.supabase.table(TABLE).insert(data.model_dump()),
            "create brand",
        )
        if not rows:
            raise PersistenceError("Failed to create brand")

        logger.info("Created brand %s", rows[0]["id"])
        return rows[0]

    async def update_brand(self, brand_id: int, data: BrandWrite) -> Brand:
        """Replace a brand's name and logo.

        Raises:
            NotFoundError: If no brand has this id.
        """
        payload = data.model_dump()
        payload["updated_at"] = utc_timestamp()
        rows = run_query(
            self.supabase.table(TABLE).update(payload).eq("id", brand_id),
            "update brand",
        )
        if not rows:
            raise NotFoundError("Brand not found")

        logger.info("Updated brand %s", brand_id)
        return rows[0]

    async def delete_brand(self, brand_id: int) -> None:
        """Delete a brand.

        Raises:
            NotFoundError: If no brand has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).delete().eq("id", brand_id),
            "delete brand",
        )
        if not rows:
            raise NotFoundError("Brand not found")

        logger.info("Deleted brand %s", brand_id)

    async def reorder_brands(self, brand_ids: list[int]) -> list[Brand]:
        """Persist a new display order.

        Each id's position in ``brand_ids`` becomes its ``ordem``. Brands
        left out keep their current position. Writes are issued one per
        brand and are not wrapped in a transaction.

        Args:
            brand_ids: Brand ids in the desired order.

        Returns:
            list[Brand]: All brands in their new display order.

        Raises:
            ValidationError: If an id appears more than once.
            NotFoundError: If an id does not match any brand.
        """
        if len(set(brand_ids)) != len(brand_ids):
            raise ValidationError("Brand ids must be unique", field="ids")

        existing = {
            row["id"]
            for row in run_query(self.supabase.table(TABLE).select("id"), "list brand ids")
        }
        missing = [brand_id for brand_id in brand_ids if brand_id not in existing]
        if missing:
            raise NotFoundError(f"Brand not found: {missing[0]}")

        for position, brand_id in enumerate(brand_ids):
            run_query(
                self.supabase.table(TABLE)
                .update({"ordem": position, "updated_at": utc_timestamp()})
                .eq("id", brand_id),
                "reorder brands",
            )

        logger.info("Reordered %d brands", len(brand_ids))
        return await self.list_brands()
