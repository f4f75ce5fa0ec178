"""Order store backed by the pedidos table."""

import logging

from supabase import Client

from src.api.middleware.error_handler import NotFoundError, PersistenceError
from src.core.supabase import get_supabase_client, run_query, utc_timestamp
from src.models.order import Order, OrderCreate, OrderStatus, OrderUpdate

logger = logging.getLogger(__name__)

TABLE = "pedidos"


class OrderService:
    """Create/read/update/delete operations over persisted orders.

    The store owns identity and timestamps; callers never set ``id`` or
    ``created_at``. Every method issues exactly one statement.
    """

    def __init__(self, supabase_client: Client | None = None) -> None:
        """Initialize order store.

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

    async def create(self, data: OrderCreate) -> Order:
        """Insert a new order.

        Args:
            data: Validated order row.

        Returns:
            Order: The persisted order including id and timestamps.

        Raises:
            PersistenceError: If the insert fails or returns no row.
        """
        rows = run_query(self.supabase.table(TABLE).insert(dict(data)), "create order")
        if not rows:
            raise PersistenceError("Failed to create order")

        order = rows[0]
        logger.info("Created order %s", order["id"])
        return order

    async def get(self, order_id: int) -> Order:
        """Get an order by ID.

        Raises:
            NotFoundError: If no order has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).select("*").eq("id", order_id),
            "fetch order",
        )
        if not rows:
            raise NotFoundError("Order not found")
        return rows[0]

    async def list_all(self) -> list[Order]:
        """List all orders, newest first."""
        return run_query(
            self.supabase.table(TABLE).select("*").order("created_at", desc=True),
            "list orders",
        )

    async def update(self, order_id: int, data: OrderUpdate) -> Order:
        """Replace the editable fields of an order.

        Raises:
            NotFoundError: If no order has this id.
        """
        payload = dict(data)
        payload["updated_at"] = utc_timestamp()
        rows = run_query(
            self.supabase.table(TABLE).update(payload).eq("id", order_id),
            "update order",
        )
        if not rows:
            raise NotFoundError("Order not found")

        logger.info("Updated order %s", order_id)
        return rows[0]

    async def patch_status(self, order_id: int, status: OrderStatus) -> Order:
        """Change only the status of an order.

        Raises:
            NotFoundError: If no order has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE)
            .update({"status": status.value, "updated_at": utc_timestamp()})
            .eq("id", order_id),
            "update order status",
        )
        if not rows:
            raise NotFoundError("Order not found")

        logger.info("Order %s status changed to %s", order_id, status.value)
        return rows[0]

    async def delete(self, order_id: int) -> Order:
        """Delete an order and return the removed row.

        Raises:
            NotFoundError: If no order has this id.
        """
        rows = run_query(
            self.supabase.table(TABLE).delete().eq("id", order_id),
            "delete order",
        )
        if not rows:
            raise NotFoundError("Order not found")

        logger.info("Deleted order %s", order_id)
        return rows[0]
