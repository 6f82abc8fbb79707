"""Shared kernel exception hierarchy."""
from typing import Optional, Dict, Any


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ValidationError(DomainException):
    """Raised when a field constraint is violated."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        details = dict(details or {})
        if field is not None:
            details.setdefault("field", field)
        super().__init__(message, "validation_error", details)

    @property
    def field(self) -> Optional[str]:
        return self.details.get("field")


class EntityNotFoundError(DomainException):
    """Raised when an entity id does not exist for read/update/delete."""

    def __init__(self, level: str, entity_id: int) -> None:
        super().__init__(
            f"{level} {entity_id} not found",
            "not_found",
            {"level": level, "id": entity_id},
        )


class ParentNotFoundError(DomainException):
    """Raised when a referenced parent id does not exist."""

    def __init__(self, level: str, parent_id: Optional[int]) -> None:
        super().__init__(
            f"Parent {level} {parent_id} not found",
            "parent_not_found",
            {"level": level, "parent_id": parent_id},
        )


class OwnershipMismatchError(DomainException):
    """Raised when a child does not belong to the claimed parent."""

    def __init__(self, level: str, entity_id: int, claimed_parent_id: int, actual_parent_id: Optional[int]) -> None:
        super().__init__(
            f"{level} {entity_id} does not belong to parent {claimed_parent_id}",
            "ownership_mismatch",
            {
                "level": level,
                "id": entity_id,
                "claimed_parent_id": claimed_parent_id,
                "actual_parent_id": actual_parent_id,
            },
        )
