"""Product service for catalog listings and product CRUD."""

import logging
from typing import Any

from supabase import Client

from src.api.middleware.error_handler import NotFoundError, PersistenceError
from src.core.supabase import get_supabase_client, run_query, utc_timestamp
from src.models.product import Product, ProductWrite
from src.schemas.product import ProductWrite as ProductWriteSchema

logger = logging.getLogger(__name__)

TABLE = "produtos"

# Embeds the category and brand rows through their foreign keys
LISTING_COLUMNS = (
    "*, categoria:categorias(id, nome), marca:marcas(id, nome, logo_url)"
)


def _to_row(data: ProductWriteSchema) -> ProductWrite:
    return {
        "nome": data.nome.strip(),
        "preco": str(data.preco),
        "id_categoria": data.categoria_id,
        "marca_id": data.marca_id,
        "descricao": data.descricao,
        "imagem_url": data.imagem_url,
        "estoque": data.estoque,
    }


class ProductService:
    """Service for product operations."""

    def __init__(self, supabase_client: Client | None = None) -> None:
        """Initialize product service.

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

    async def list_products(self) -> list[Product]:
        """List all products grouped by brand, cheapest first within a brand."""
        return run_query(
            self.supabase.table(TABLE)
            .select(LISTING_COLUMNS)
            .order("marca_id")
            .order("preco"),
            "list products",
        )

    async def list_by_category(self, category_id: int) -> list[Product]:
        """List products in a category ordered by name."""
        return run_query(
            self.supabase.table(TABLE)
            .select(LISTING_COLUMNS)
            .eq("id_categoria", category_id)
            .order("nome"),
            "list products by category",
        )

    async def list_by_brand(self, brand_id: int) -> list[Product]:
        """List products of a brand ordered by name."""
        return run_query(
            self.supabase.table(TABLE)
            .select(LISTING_COLUMNS)
            .eq("marca_id", brand_id)
            .order("nome"),
            "list products by brand",
        )

    async def get_products(self, product_ids: list[int]) -> dict[int, Product]:
        """Fetch several products at once.

        Args:
            product_ids: Product ids to look up.

        Returns:
            dict: Found products keyed by id. Unknown ids are absent.
        """
        if not product_ids:
            return {}
        rows: list[dict[str, Any]] = run_query(
            self.supabase.table(TABLE).select("*").in_("id", sorted(set(product_ids))),
            "fetch products",
        )
        return {row["id"]: row for row in rows}

    async def create_product(self, data: ProductWriteSchema) -> Product:
        rows = run_query(
            self.supabase.table(TABLE).insert(_to_row(data)),
            "create product",
        )
        if not rows:
            raise PersistenceError("Failed to create product")

        logger.info("Created product %s", rows[0]["id"])
        return rows[0]

    async def update_product(self, product_id: int, data: ProductWriteSchema) -> Product:
        """Replace a product's editable fields.

        Raises:
            NotFoundError: If no product has this id.
        """
        payload: dict[str, Any] = dict(_to_row(data))
        payload["updated_at"] = utc_timestamp()
        rows = run_query(
            self.supabase.table(TABLE).update(payload).eq("id", product_id),
            "update product",
        )
        if not rows:
            raise NotFoundError("Product not found")

        logger.info("Updated product %s", product_id)
        return rows[0]

    async def delete_product(self, product_id: int) -> None:
        """Delete a product.

        Raises:
            NotFoundError: If no product has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).delete().eq("id", product_id),
            "delete product",
        )
        if not rows:
            raise NotFoundError("Product not found")

        logger.info("Deleted product %s", product_id)
