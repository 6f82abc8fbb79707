"""Shared kernel primitives (value objects, errors, results)."""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ParentNotFoundError,
    OwnershipMismatchError,
)
from .value_objects import (
    NAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    EstimatedHours,
    NodeName,
    Description,
)
from .result import Result

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ParentNotFoundError",
    "OwnershipMismatchError",
    "NAME_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "EstimatedHours",
    "NodeName",
    "Description",
    "Result",
]
