"""Pydantic schemas for Product API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ProductCreateRequest(BaseModel):
    """Schema for creating a product."""

    sku: str = Field(..., description="Stock keeping unit, unique across products")
    name: str = Field(..., description="Product name")
    price_cents: int = Field(..., description="Price in cents")


class ProductUpdateRequest(BaseModel):
    """Schema for updating a product. Omitted fields are left unchanged."""

    sku: str | None = Field(None, description="New SKU")
    name: str | None = Field(None, description="New name")
    price_cents: int | None = Field(None, description="New price in cents")


class ProductResponse(BaseModel):
    """Schema for Product response."""

    id: UUID
    sku: str
    name: str
    price_cents: int
    created_at: datetime
    updated_at: datetime


class ProductsListResponse(BaseModel):
    """Schema for list of products response."""

    products: list[ProductResponse] = Field(..., description="All products, oldest first")
