"""
Domain layer exceptions.

Every failure that crosses the application boundary is one of four kinds,
listed in order of increasing severity:

- VALIDATION: caller input violates a precondition checkable without storage.
- NOT_FOUND: the requested id has no corresponding row.
- CONFLICT: the mutation would violate a uniqueness or referential constraint.
- UNEXPECTED: any other storage failure.

Each concrete exception carries its kind as a class attribute so that a
transport can translate it without knowing which entity raised it.
"""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Closed set of failure kinds crossing the application boundary."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Not raised directly; subclasses pick one of the ErrorKind base classes below.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when caller input fails validation.

    Example: empty email, negative price, unknown order status.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up an order by an id that doesn't exist.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """
    Raised when storage rejects a mutation because of a constraint.

    Example: a second user with the same email, deleting a user that still has orders.
    """

    kind = ErrorKind.CONFLICT


class UnexpectedError(DomainError):
    """
    Raised for any storage failure that is not one of the other kinds.

    The message is meant for operators only; transports must not show it to
    callers. The original exception is chained as ``__cause__``.
    """

    kind = ErrorKind.UNEXPECTED

    def __init__(self, operation: str) -> None:
        super().__init__(f"Storage failure during {operation}", {"operation": operation})
        self.operation = operation
