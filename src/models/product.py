"""Product model type definitions for database operations."""

from datetime import datetime
from decimal import Decimal
from typing import TypedDict


class CategorySummary(TypedDict):
    """Category embedded in a product listing."""

    id: int
    nome: str


class BrandSummary(TypedDict, total=False):
    """Brand embedded in a product listing."""

    id: int
    nome: str
    logo_url: str | None


class Product(TypedDict):
    """Produtos table row representation, with joined category and brand."""

    id: int
    nome: str
    preco: Decimal
    descricao: str | None
    imagem_url: str | None
    estoque: int
    id_categoria: int
    marca_id: int | None
    categoria: CategorySummary | None
    marca: BrandSummary | None
    created_at: datetime
    updated_at: datetime


class ProductWrite(TypedDict, total=False):
    """Data written on product create or update."""

    nome: str
    preco: str
    id_categoria: int
    marca_id: int | None
    descricao: str | None
    imagem_url: str | None
    estoque: int
