"""Category model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class Category(TypedDict):
    """Categorias table row representation."""

    id: int
    nome: str
    imagem_url: str | None
    created_at: datetime
    updated_at: datetime


class CategoryWrite(TypedDict, total=False):
    """Data written on category create or update."""

    nome: str
    imagem_url: str | None
