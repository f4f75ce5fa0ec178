"""Product Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductWrite(BaseModel):
    """Schema for creating or replacing a product."""

    model_config = ConfigDict(from_attributes=True)

    nome: str = Field(..., min_length=1, max_length=200, description="Product name")
    preco: Decimal = Field(..., ge=0, description="Unit price")
    categoria_id: int = Field(..., description="Category identifier")
    marca_id: int | None = Field(default=None, description="Brand identifier")
    descricao: str | None = Field(default=None, description="Product description")
    imagem_url: str | None = Field(default=None, description="Product image URL")
    estoque: int = Field(default=0, ge=0, description="Units in stock")


class CategorySummary(BaseModel):
    """Category embedded in a product response."""

    id: int
    nome: str


class BrandSummary(BaseModel):
    """Brand embedded in a product response."""

    id: int
    nome: str
    logo_url: str | None = None


class ProductResponse(BaseModel):
    """Schema for product API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Product identifier")
    nome: str = Field(description="Product name")
    preco: Decimal = Field(description="Unit price")
    descricao: str | None = Field(default=None, description="Product description")
    imagem_url: str | None = Field(default=None, description="Product image URL")
    estoque: int = Field(default=0, description="Units in stock")
    id_categoria: int | None = Field(default=None, description="Category identifier")
    marca_id: int | None = Field(default=None, description="Brand identifier")
    categoria: CategorySummary | None = Field(default=None, description="Category summary")
    marca: BrandSummary | None = Field(default=None, description="Brand summary")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class ProductListResponse(BaseModel):
    """Schema for product list responses."""

    items: list[ProductResponse] = Field(description="Products")
