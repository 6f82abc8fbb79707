"""Structural integrity checks for the estimation tree."""
from __future__ import annotations

import logging
from typing import Optional

from estimator.domains.estimation.domain.entities import Level, TreeNode
from estimator.domains.estimation.domain.gateway import PersistenceGateway
from estimator.shared_kernel.exceptions import (
    EntityNotFoundError,
    OwnershipMismatchError,
    ParentNotFoundError,
)
from estimator.shared_kernel.result import Result

logger = logging.getLogger(__name__)


class HierarchyValidator:
    """Gates create/update/delete against the shape of the tree."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway

    async def validate_parent_exists(self, parent_id: Optional[int], level: Level) -> Result:
        """Check that ``parent_id`` names an existing node one level above ``level``."""
        parent_level = level.parent
        if parent_level is None:
            if parent_id is None:
                return Result.success(None)
            return Result.failure(ParentNotFoundError(level.label, parent_id))

        if parent_id is None or not await self.gateway.exists_by_id(parent_level, parent_id):
            logger.warning("Rejected %s: parent %s %s missing", level.value, parent_level.value, parent_id)
            return Result.failure(ParentNotFoundError(parent_level.label, parent_id))
        return Result.success(parent_id)

    async def validate_ownership(self, level: Level, child_id: int, claimed_parent_id: int) -> Result:
        """Load ``child_id`` and check it hangs under ``claimed_parent_id``."""
        child: Optional[TreeNode] = await self.gateway.find_by_id(level, child_id)
        if child is None:
            return Result.failure(EntityNotFoundError(level.label, child_id))
        if child.parent_id != claimed_parent_id:
            logger.warning(
                "Ownership mismatch: %s %s belongs to %s, not %s",
                level.value,
                child_id,
                child.parent_id,
                claimed_parent_id,
            )
            return Result.failure(
                OwnershipMismatchError(level.label, child_id, claimed_parent_id, child.parent_id)
            )
        return Result.success(child)

    async def validate_owner_id(self, level: Level, child_id: int, claimed_parent_id: int) -> Result:
        """Same check as ``validate_ownership`` reading only the stored parent id."""
        if level.is_root:
            return Result.failure(EntityNotFoundError(level.label, child_id))
        actual_parent_id = await self.gateway.parent_id_of(level, child_id)
        if actual_parent_id is None:
            return Result.failure(EntityNotFoundError(level.label, child_id))
        if actual_parent_id != claimed_parent_id:
            logger.warning(
                "Ownership mismatch: %s %s belongs to %s, not %s",
                level.value,
                child_id,
                actual_parent_id,
                claimed_parent_id,
            )
            return Result.failure(
                OwnershipMismatchError(level.label, child_id, claimed_parent_id, actual_parent_id)
            )
        return Result.success(child_id)

    async def cascade_delete(self, node_id: int, level: Level) -> int:
        """Delete a node with its whole subtree.

        Returns the number of removed nodes, target included. 0 means the
        target did not exist, or a concurrent request removed it first.
        """
        descendants = await self._count_descendants(level, node_id)
        removed = await self.gateway.delete_by_id(level, node_id)
        if removed == 0:
            return 0
        logger.info("Deleted %s %s with %d descendants", level.value, node_id, descendants)
        return removed + descendants

    async def _count_descendants(self, level: Level, node_id: int) -> int:
        if level.is_leaf:
            return 0
        children = await self.gateway.find_by_parent_id(level.child, node_id)
        total = len(children)
        for child in children:
            total += await self._count_descendants(level.child, child.id)
        return total
