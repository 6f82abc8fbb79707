"""Estimation domain entities."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from estimator.shared_kernel.exceptions import ValidationError
from estimator.shared_kernel.value_objects import Description, EstimatedHours, NodeName


class Level(str, Enum):
    """Hierarchy level, in strict parent-child order."""

    PROJECT = "project"
    SUBPROJECT = "subproject"
    TASK = "task"
    SUBTASK = "subtask"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def depth(self) -> int:
        return _ORDER.index(self)

    @property
    def parent(self) -> Optional["Level"]:
        if self.depth == 0:
            return None
        return _ORDER[self.depth - 1]

    @property
    def child(self) -> Optional["Level"]:
        if self.depth == len(_ORDER) - 1:
            return None
        return _ORDER[self.depth + 1]

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return self.child is None

    def descendants(self) -> List["Level"]:
        """Levels strictly below this one, nearest first."""
        return list(_ORDER[self.depth + 1:])


_ORDER = (Level.PROJECT, Level.SUBPROJECT, Level.TASK, Level.SUBTASK)
_LABELS = {
    Level.PROJECT: "Project",
    Level.SUBPROJECT: "SubProject",
    Level.TASK: "Task",
    Level.SUBTASK: "SubTask",
}

_UNSET: Any = object()


@dataclass(frozen=True)
class TreeNode:
    """A node of the estimation tree.

    One shape serves all four levels; the level tag decides which fields are
    allowed. Only SubTasks carry estimated hours, and only Projects have no
    parent. Construction validates every field and raises ValidationError.
    """

    level: Level
    name: str
    description: Optional[str] = None
    deadline: Optional[date] = None
    parent_id: Optional[int] = None
    estimated_hours: Optional[float] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, Level):
            object.__setattr__(self, "level", Level(self.level))

        object.__setattr__(self, "name", str(NodeName(self.name)))

        if self.description is not None:
            description = str(Description(self.description))
            object.__setattr__(self, "description", description or None)

        if self.deadline is not None:
            if isinstance(self.deadline, datetime):
                object.__setattr__(self, "deadline", self.deadline.date())
            elif not isinstance(self.deadline, date):
                raise ValidationError("Deadline must be a calendar date", field="deadline")

        if self.level.is_root and self.parent_id is not None:
            raise ValidationError("A project has no parent", field="parent_id")
        if not self.level.is_root and self.parent_id is None:
            raise ValidationError(
                f"A {self.level.label} requires a parent {self.level.parent.label}",
                field="parent_id",
            )

        if self.level.is_leaf:
            if self.estimated_hours is None:
                raise ValidationError("Estimated hours are required", field="estimated_hours")
            object.__setattr__(self, "estimated_hours", float(EstimatedHours(self.estimated_hours)))
        elif self.estimated_hours is not None:
            raise ValidationError(
                f"A {self.level.label} does not carry its own estimated hours",
                field="estimated_hours",
            )

    def with_id(self, node_id: int) -> "TreeNode":
        return replace(self, id=node_id)

    def with_changes(
        self,
        *,
        name: Any = _UNSET,
        description: Any = _UNSET,
        deadline: Any = _UNSET,
        estimated_hours: Any = _UNSET,
    ) -> "TreeNode":
        """Return a re-validated copy; id, level and parent id never change."""
        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("description", description),
                ("deadline", deadline),
                ("estimated_hours", estimated_hours),
            )
            if value is not _UNSET
        }
        return replace(self, **changes)


@dataclass
class EstimateBreakdown:
    """A materialised subtree with the rolled-up hours at every node."""

    node: TreeNode
    children: List["EstimateBreakdown"] = field(default_factory=list)
    effective_hours: float = 0.0

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self) -> int:
        return sum(1 for _ in self.walk())
