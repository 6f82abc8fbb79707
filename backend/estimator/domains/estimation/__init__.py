"""Estimation bounded context."""

from .domain.entities import Level, TreeNode, EstimateBreakdown

__all__ = [
    "Level",
    "TreeNode",
    "EstimateBreakdown",
]
