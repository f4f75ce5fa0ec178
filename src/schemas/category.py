"""Category Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryWrite(BaseModel):
    """Schema for creating or replacing a category."""

    model_config = ConfigDict(from_attributes=True)

    nome: str = Field(..., min_length=1, max_length=100, description="Category name")
    imagem_url: str | None = Field(default=None, description="Category image URL")


class CategoryResponse(CategoryWrite):
    """Schema for category API responses."""

    id: int = Field(description="Category identifier")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class CategoryListResponse(BaseModel):
    """Schema for category list responses."""

    items: list[CategoryResponse] = Field(description="Categories ordered by name")
