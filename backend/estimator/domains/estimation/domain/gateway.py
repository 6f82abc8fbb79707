"""Persistence port for the estimation tree."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from estimator.domains.estimation.domain.entities import Level, TreeNode


class PersistenceGateway(ABC):
    """Basic storage operations at each hierarchy level.

    Implementations own id assignment and the cascading delete; write
    operations report affected-row counts so that a concurrent removal shows
    up as 0 instead of an exception.
    """

    @abstractmethod
    async def find_by_id(self, level: Level, node_id: int) -> Optional[TreeNode]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_parent_id(self, level: Level, parent_id: int) -> List[TreeNode]:
        """Children of ``parent_id`` at ``level``, ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self, level: Level) -> List[TreeNode]:
        raise NotImplementedError

    @abstractmethod
    async def insert(self, node: TreeNode) -> int:
        """Store a new node and return the assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, node: TreeNode) -> int:
        """Rewrite name, description, deadline and hours; returns affected rows."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_id(self, level: Level, node_id: int) -> int:
        """Delete a node and, through the storage cascade, its subtree."""
        raise NotImplementedError

    @abstractmethod
    async def exists_by_id(self, level: Level, node_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def parent_id_of(self, level: Level, node_id: int) -> Optional[int]:
        raise NotImplementedError
