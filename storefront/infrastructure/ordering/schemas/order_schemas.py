"""Pydantic schemas for Order API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class OrderCreateRequest(BaseModel):
    """Schema for creating an order."""

    user_id: UUID = Field(..., description="Id of the user placing the order")
    status: str = Field(..., description="pending, paid, shipped, delivered or cancelled")
    total_cents: int = Field(..., description="Order total in cents")


class OrderUpdateRequest(BaseModel):
    """Schema for updating an order. The owning user cannot be changed."""

    status: str | None = Field(None, description="New status")
    total_cents: int | None = Field(None, description="New total in cents")


class OrderResponse(BaseModel):
    """Schema for Order response."""

    id: UUID
    user_id: UUID
    status: str
    total_cents: int
    created_at: datetime
    updated_at: datetime


class OrdersListResponse(BaseModel):
    """Schema for list of orders response."""

    orders: list[OrderResponse] = Field(..., description="All orders, oldest first")
