"""Product entity for the catalog."""

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.common.entity import Entity
from storefront.domain.common.validation import require_non_negative_amount, require_text
from storefront.domain.common.value_objects.ids import ProductId


@dataclass(eq=False)
class Product(Entity[ProductId]):
    """
    Product entity.

    Business Rules:
    - SKU must be unique (enforced at storage level)
    - SKU and name must be non-empty
    - Price is stored in cents and is never negative
    """

    id: ProductId
    sku: str
    name: str
    price_cents: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        require_text(self.sku, "sku")
        require_text(self.name, "name")
        require_non_negative_amount(self.price_cents, "price_cents")
