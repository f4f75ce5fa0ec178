"""Category service for catalog category CRUD."""

import logging

from supabase import Client

from src.api.middleware.error_handler import NotFoundError, PersistenceError
from src.core.supabase import get_supabase_client, run_query, utc_timestamp
from src.models.category import Category
from src.schemas.category import CategoryWrite

logger = logging.getLogger(__name__)

TABLE = "categorias"


class CategoryService:
    """Service for category operations."""

    def __init__(self, supabase_client: Client | None = None) -> None:
        self._supabase_client = supabase_client

    @property
    def supabase(self) -> Client:
        """Get Supabase client."""
        if self._supabase_client is None:
            self._supabase_client = get_supabase_client()
        return self._supabase_client

    async def list_categories(self) -> list[Category]:
        """List categories ordered by name."""
        return run_query(
            self.supabase.table(TABLE).select("*").order("nome"),
            "list categories",
        )

    async def create_category(self, data: CategoryWrite) -> Category:
        rows = run_query(
            self.supabase.table(TABLE).insert(data.model_dump()),
            "create category",
        )
        if not rows:
            raise PersistenceError("Failed to create category")

        logger.info("Created category %s", rows[0]["id"])
        return rows[0]

    async def update_category(self, category_id: int, data: CategoryWrite) -> Category:
        """Replace a category's name and image.

        Raises:
            NotFoundError: If no category has this id.
        """
        payload = data.model_dump()
        payload["updated_at"] = utc_timestamp()
        rows = run_query(
            self.supabase.table(TABLE).update(payload).eq("id", category_id),
            "update category",
        )
        if not rows:
            raise NotFoundError("Category not found")

        logger.info("Updated category %s", category_id)
        return rows[0]

    async def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Raises:
            NotFoundError: If no category has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).delete().eq("id", category_id),
            "delete category",
        )
        if not rows:
            raise NotFoundError("Category not found")

        logger.info("Deleted category %s", category_id)
