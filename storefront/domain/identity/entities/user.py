"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.common.entity import Entity
from storefront.domain.common.validation import require_text
from storefront.domain.common.value_objects.ids import UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity.

    Business Rules:
    - Email must be unique (enforced at storage level)
    - Email and name must be non-empty
    - Id and created_at never change after creation
    """

    id: UserId
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        require_text(self.email, "email")
        require_text(self.name, "name")
