"""Estimation service"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from estimator.domains.estimation.domain.aggregation import HoursAggregator
from estimator.domains.estimation.domain.entities import EstimateBreakdown, Level, TreeNode
from estimator.domains.estimation.domain.gateway import PersistenceGateway
from estimator.domains.estimation.domain.validator import HierarchyValidator
from estimator.shared_kernel.exceptions import EntityNotFoundError, ValidationError
from estimator.shared_kernel.result import Result

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "description", "deadline", "estimated_hours")


class EstimationService:
    """CRUD and roll-up operations over the Project → SubProject → Task → SubTask tree.

    Every operation returns a Result. Expected conditions (validation
    failures, missing parents, wrong ownership, missing ids) come back as
    failures; storage faults propagate as exceptions.
    """

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway
        self.validator = HierarchyValidator(gateway)
        self.aggregator = HoursAggregator(gateway)

    async def create(
        self,
        level: Level,
        parent_id: Optional[int],
        name: str,
        description: Optional[str] = None,
        deadline: Optional[date] = None,
        estimated_hours: Optional[float] = None,
    ) -> Result:
        """
        Create a node under an existing parent.

        Args:
            level: Level of the new node
            parent_id: Id of the parent one level up (None for projects)
            name: Node name
            description: Optional description
            deadline: Optional deadline
            estimated_hours: Required for subtasks, forbidden elsewhere

        Returns:
            Result holding the stored node with its assigned id
        """
        try:
            node = TreeNode(
                level=level,
                parent_id=parent_id,
                name=name,
                description=description,
                deadline=deadline,
                estimated_hours=estimated_hours,
            )
        except ValidationError as exc:
            logger.warning("Rejected %s: %s", level.value, exc)
            return Result.failure(exc)

        parent_check = await self.validator.validate_parent_exists(parent_id, level)
        if parent_check.is_failure:
            return parent_check

        node_id = await self.gateway.insert(node)
        logger.info("Created %s %s under %s", level.value, node_id, parent_id)
        return Result.success(node.with_id(node_id))

    async def get(self, level: Level, node_id: int, parent_id: Optional[int] = None) -> Result:
        """Load a node; with ``parent_id`` the node must also belong to that parent."""
        if parent_id is not None:
            return await self.validator.validate_ownership(level, node_id, parent_id)
        node = await self.gateway.find_by_id(level, node_id)
        if node is None:
            return Result.failure(EntityNotFoundError(level.label, node_id))
        return Result.success(node)

    async def list_projects(self) -> List[TreeNode]:
        return await self.gateway.find_all(Level.PROJECT)

    async def list_children(self, level: Level, parent_id: int) -> Result:
        """List the ``level`` nodes under ``parent_id``, ordered by id."""
        parent_check = await self.validator.validate_parent_exists(parent_id, level)
        if parent_check.is_failure:
            return parent_check
        return Result.success(await self.gateway.find_by_parent_id(level, parent_id))

    async def update(
        self,
        level: Level,
        node_id: int,
        changes: Dict[str, Any],
        parent_id: Optional[int] = None,
    ) -> Result:
        """
        Update name, description, deadline or hours of a node.

        Id, level and parent id are preserved. Zero affected rows means the
        node vanished after it was read and is reported as not found.
        """
        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            field = sorted(unknown)[0]
            return Result.failure(ValidationError(f"Field {field} cannot be updated", field=field))

        current = await self.get(level, node_id, parent_id)
        if current.is_failure:
            return current

        try:
            updated = current.value.with_changes(**changes)
        except ValidationError as exc:
            logger.warning("Rejected update of %s %s: %s", level.value, node_id, exc)
            return Result.failure(exc)

        affected = await self.gateway.update(updated)
        if affected == 0:
            return Result.failure(EntityNotFoundError(level.label, node_id))
        logger.info("Updated %s %s", level.value, node_id)
        return Result.success(updated)

    async def delete(self, level: Level, node_id: int, parent_id: Optional[int] = None) -> Result:
        """
        Delete a node and its whole subtree.

        Returns:
            Result holding the number of removed nodes, or EntityNotFoundError
        """
        if parent_id is not None:
            owned = await self.validator.validate_owner_id(level, node_id, parent_id)
            if owned.is_failure:
                return owned

        removed = await self.validator.cascade_delete(node_id, level)
        if removed == 0:
            return Result.failure(EntityNotFoundError(level.label, node_id))
        return Result.success(removed)

    async def effective_hours(self, level: Level, node_id: int) -> Result:
        node = await self.get(level, node_id)
        if node.is_failure:
            return node
        return Result.success(await self.aggregator.effective_hours(node.value))

    async def breakdown(self, level: Level, node_id: int) -> Result:
        """Subtree of ``node_id`` with rolled-up hours at every node."""
        node = await self.get(level, node_id)
        if node.is_failure:
            return node
        tree: EstimateBreakdown = await self.aggregator.build_breakdown(node.value)
        return Result.success(tree)
