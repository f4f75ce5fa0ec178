"""Brand model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class Brand(TypedDict):
    """Marcas table row representation.

    ``ordem`` controls the position of the brand in the storefront listing.
    """

    id: int
    nome: str
    logo_url: str | None
    ordem: int | None
    created_at: datetime
    updated_at: datetime


class BrandWrite(TypedDict, total=False):
    """Data written on brand create or update."""

    nome: str
    logo_url: str | None
    ordem: int
