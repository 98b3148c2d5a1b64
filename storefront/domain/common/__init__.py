"""
Domain common module.

Contains base classes for domain modeling:
- Entity / EntityId: Objects with identity and their typed identifiers
- DomainError and its four kinds: the error taxonomy crossing the application boundary
"""

from .entity import Entity, EntityId
from .exceptions import (
    ConflictError,
    DomainError,
    EntityNotFoundError,
    ErrorKind,
    UnexpectedError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ErrorKind",
    "UnexpectedError",
    "ValidationError",
]
