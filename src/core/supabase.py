"""Supabase client singleton for database operations."""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from src.api.middleware.error_handler import PersistenceError
from src.core.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton for database operations.

    Uses the secret key for backend operations, which bypasses RLS
    at the PostgREST level. Admin authorization must be verified
    by the API layer before any write goes through this client.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Performs a simple query against the orders table to verify connectivity.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table("pedidos").select("id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}


def run_query(query: Any, action: str) -> list[dict[str, Any]]:
    """Execute a PostgREST query and return its rows.

    Any client or transport failure is logged and re-raised as
    PersistenceError; a query matching nothing returns an empty list.

    Args:
        query: A built query builder (table(...).select(...) etc.).
        action: Short description used in log and error messages.

    Returns:
        list[dict]: Returned rows.

    Raises:
        PersistenceError: If the query could not be executed.
    """
    try:
        response = query.execute()
    except Exception as e:
        logger.error("Failed to %s: %s", action, e)
        raise PersistenceError(f"Failed to {action}") from e
    return response.data or []


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string for updated_at columns."""
    return datetime.now(timezone.utc).isoformat()
