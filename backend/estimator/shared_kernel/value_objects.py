"""Shared kernel value objects."""
from dataclasses import dataclass
import math

from .exceptions import ValidationError


NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200


@dataclass(frozen=True)
class EstimatedHours:
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError("Estimated hours must be a number", field="estimated_hours")
        if not math.isfinite(self.value):
            raise ValidationError("Estimated hours must be finite", field="estimated_hours")
        if self.value <= 0:
            raise ValidationError("Estimated hours must be greater than 0", field="estimated_hours")

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class NodeName:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Name must not be blank", field="name")
        if len(self.value.strip()) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name must be at most {NAME_MAX_LENGTH} characters",
                field="name",
                details={"max_length": NAME_MAX_LENGTH},
            )

    def __str__(self) -> str:
        return self.value.strip()


@dataclass(frozen=True)
class Description:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Description must be text", field="description")
        if len(self.value) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                field="description",
                details={"max_length": DESCRIPTION_MAX_LENGTH},
            )

    def __str__(self) -> str:
        return self.value
