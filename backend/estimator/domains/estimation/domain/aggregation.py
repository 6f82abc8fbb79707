"""Hours roll-up over the estimation tree."""
from __future__ import annotations

from estimator.domains.estimation.domain.entities import EstimateBreakdown, TreeNode
from estimator.domains.estimation.domain.gateway import PersistenceGateway


def rollup(breakdown: EstimateBreakdown) -> float:
    """Fold an in-memory subtree bottom-up, filling ``effective_hours``."""
    if breakdown.node.level.is_leaf:
        breakdown.effective_hours = breakdown.node.estimated_hours
    else:
        breakdown.effective_hours = sum(rollup(child) for child in breakdown.children)
    return breakdown.effective_hours


class HoursAggregator:
    """Computes effective estimated hours for any node.

    A SubTask reports its own stored value; every other node reports the sum
    of its children, or 0 when it has none. The tree is at most four levels
    deep, so the recursion always terminates.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway

    async def effective_hours(self, node: TreeNode) -> float:
        if node.level.is_leaf:
            return node.estimated_hours
        children = await self.gateway.find_by_parent_id(node.level.child, node.id)
        total = 0.0
        for child in children:
            total += await self.effective_hours(child)
        return total

    async def build_breakdown(self, node: TreeNode) -> EstimateBreakdown:
        """Load the subtree under ``node`` and roll its hours up."""
        breakdown = await self._load(node)
        rollup(breakdown)
        return breakdown

    async def _load(self, node: TreeNode) -> EstimateBreakdown:
        breakdown = EstimateBreakdown(node=node)
        if not node.level.is_leaf:
            children = await self.gateway.find_by_parent_id(node.level.child, node.id)
            breakdown.children = [await self._load(child) for child in children]
        return breakdown
