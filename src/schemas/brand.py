"""Brand Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BrandWrite(BaseModel):
    """Schema for creating or replacing a brand."""

    model_config = ConfigDict(from_attributes=True)

    nome: str = Field(..., min_length=1, max_length=100, description="Brand name")
    logo_url: str | None = Field(default=None, description="Brand logo URL")


class BrandResponse(BrandWrite):
    """Schema for brand API responses."""

    id: int = Field(description="Brand identifier")
    ordem: int | None = Field(default=None, description="Position in the storefront listing")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class BrandListResponse(BaseModel):
    """Schema for brand list responses."""

    items: list[BrandResponse] = Field(description="Brands in display order")


class BrandReorderRequest(BaseModel):
    """Schema for PUT /admin/brands/reorder.

    The position of each id in the list becomes its ``ordem``.
    """

    ids: list[int] = Field(..., min_length=1, description="Brand ids in the desired display order")
