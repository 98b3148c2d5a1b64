"""DTOs for product operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewProduct:
    """Fields needed to create a product."""

    sku: str
    name: str
    price_cents: int


@dataclass(frozen=True)
class ProductChanges:
    """Partial update for a product. None means "leave unchanged"."""

    sku: str | None = None
    name: str | None = None
    price_cents: int | None = None
