"""Schemas for the estimation tree endpoints."""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from estimator.domains.estimation.domain.entities import EstimateBreakdown, Level, TreeNode
from estimator.shared_kernel.value_objects import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH


class NodeCreate(BaseModel):
    """Body for creating a project, subproject or task."""
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    deadline: Optional[date] = None


class SubTaskCreate(NodeCreate):
    """Body for creating a subtask; hours are mandatory."""
    estimated_hours: float = Field(..., gt=0)


class NodeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    deadline: Optional[date] = None


class SubTaskUpdate(NodeUpdate):
    estimated_hours: Optional[float] = Field(default=None, gt=0)


class NodeResponse(BaseModel):
    id: int
    level: Level
    parent_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    deadline: Optional[date] = None
    estimated_hours: Optional[float] = None

    model_config = {"from_attributes": True}


class NodeList(BaseModel):
    items: List[NodeResponse]
    total: int

    @classmethod
    def from_nodes(cls, nodes: List[TreeNode]) -> "NodeList":
        return cls(items=[NodeResponse.model_validate(node) for node in nodes], total=len(nodes))


class HoursResponse(BaseModel):
    level: Level
    id: int
    effective_hours: float


class DeleteResponse(BaseModel):
    level: Level
    id: int
    deleted_nodes: int


class EstimateResponse(NodeResponse):
    """A node with its rolled-up hours and the same for every descendant."""
    effective_hours: float
    children: List["EstimateResponse"] = Field(default_factory=list)

    @classmethod
    def from_breakdown(cls, breakdown: EstimateBreakdown) -> "EstimateResponse":
        node = breakdown.node
        return cls(
            id=node.id,
            level=node.level,
            parent_id=node.parent_id,
            name=node.name,
            description=node.description,
            deadline=node.deadline,
            estimated_hours=node.estimated_hours,
            effective_hours=breakdown.effective_hours,
            children=[cls.from_breakdown(child) for child in breakdown.children],
        )


EstimateResponse.model_rebuild()
