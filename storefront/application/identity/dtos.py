"""DTOs for user operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewUser:
    """Fields needed to create a user."""

    email: str
    name: str


@dataclass(frozen=True)
class UserChanges:
    """Partial update for a user. None means "leave unchanged"."""

    email: str | None = None
    name: str | None = None
