"""Estimation domain types and services."""

from .entities import Level, TreeNode, EstimateBreakdown
from .gateway import PersistenceGateway
from .aggregation import HoursAggregator, rollup
from .validator import HierarchyValidator

__all__ = [
    "Level",
    "TreeNode",
    "EstimateBreakdown",
    "PersistenceGateway",
    "HoursAggregator",
    "rollup",
    "HierarchyValidator",
]
