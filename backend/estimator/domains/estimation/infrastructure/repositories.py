"""SQLAlchemy implementation of the estimation persistence port."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from estimator.domains.estimation.domain.entities import Level, TreeNode
from estimator.domains.estimation.domain.gateway import PersistenceGateway
from estimator.models import Project, SubProject, SubTask, Task


def _project_from_row(row: Mapping[str, Any]) -> TreeNode:
    return TreeNode(
        level=Level.PROJECT,
        id=row["id"],
        name=row["name"],
        description=row["description"],
        deadline=row["deadline"],
    )


def _subproject_from_row(row: Mapping[str, Any]) -> TreeNode:
    return TreeNode(
        level=Level.SUBPROJECT,
        id=row["id"],
        parent_id=row["project_id"],
        name=row["name"],
        description=row["description"],
        deadline=row["deadline"],
    )


def _task_from_row(row: Mapping[str, Any]) -> TreeNode:
    return TreeNode(
        level=Level.TASK,
        id=row["id"],
        parent_id=row["subproject_id"],
        name=row["name"],
        description=row["description"],
        deadline=row["deadline"],
    )


def _subtask_from_row(row: Mapping[str, Any]) -> TreeNode:
    # A missing or NULL estimated_hours is an error, never 0.
    return TreeNode(
        level=Level.SUBTASK,
        id=row["id"],
        parent_id=row["task_id"],
        name=row["name"],
        description=row["description"],
        deadline=row["deadline"],
        estimated_hours=row["estimated_hours"],
    )


@dataclass(frozen=True)
class _TableMapping:
    table: Table
    parent_column: Optional[str]
    from_row: Callable[[Mapping[str, Any]], TreeNode]

    def values(self, node: TreeNode) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "name": node.name,
            "description": node.description,
            "deadline": node.deadline,
        }
        if node.level.is_leaf:
            values["estimated_hours"] = node.estimated_hours
        return values


TABLES: Dict[Level, _TableMapping] = {
    Level.PROJECT: _TableMapping(Project.__table__, None, _project_from_row),
    Level.SUBPROJECT: _TableMapping(SubProject.__table__, "project_id", _subproject_from_row),
    Level.TASK: _TableMapping(Task.__table__, "subproject_id", _task_from_row),
    Level.SUBTASK: _TableMapping(SubTask.__table__, "task_id", _subtask_from_row),
}


class SqlAlchemyGateway(PersistenceGateway):
    """Gateway over the four hierarchy tables.

    Every write is a single statement followed by a commit. Descendants are
    removed by the ``ON DELETE CASCADE`` foreign keys. Storage errors such as
    ``IntegrityError`` propagate to the caller untouched.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, level: Level, node_id: int) -> Optional[TreeNode]:
        mapping = TABLES[level]
        result = await self.db.execute(select(mapping.table).where(mapping.table.c.id == node_id))
        row = result.mappings().one_or_none()
        return mapping.from_row(row) if row is not None else None

    async def find_by_parent_id(self, level: Level, parent_id: int) -> List[TreeNode]:
        mapping = TABLES[level]
        if mapping.parent_column is None:
            raise ValueError(f"{level.label} has no parent")
        table = mapping.table
        result = await self.db.execute(
            select(table)
            .where(table.c[mapping.parent_column] == parent_id)
            .order_by(table.c.id)
        )
        return [mapping.from_row(row) for row in result.mappings().all()]

    async def find_all(self, level: Level) -> List[TreeNode]:
        mapping = TABLES[level]
        result = await self.db.execute(select(mapping.table).order_by(mapping.table.c.id))
        return [mapping.from_row(row) for row in result.mappings().all()]

    async def insert(self, node: TreeNode) -> int:
        mapping = TABLES[node.level]
        values = mapping.values(node)
        if mapping.parent_column is not None:
            values[mapping.parent_column] = node.parent_id
        result = await self.db.execute(insert(mapping.table).values(**values))
        await self.db.commit()
        return result.inserted_primary_key[0]

    async def update(self, node: TreeNode) -> int:
        mapping = TABLES[node.level]
        result = await self.db.execute(
            update(mapping.table)
            .where(mapping.table.c.id == node.id)
            .values(**mapping.values(node))
        )
        await self.db.commit()
        return result.rowcount

    async def delete_by_id(self, level: Level, node_id: int) -> int:
        mapping = TABLES[level]
        result = await self.db.execute(delete(mapping.table).where(mapping.table.c.id == node_id))
        await self.db.commit()
        return result.rowcount

    async def exists_by_id(self, level: Level, node_id: int) -> bool:
        table = TABLES[level].table
        result = await self.db.execute(select(table.c.id).where(table.c.id == node_id))
        return result.scalar_one_or_none() is not None

    async def parent_id_of(self, level: Level, node_id: int) -> Optional[int]:
        mapping = TABLES[level]
        if mapping.parent_column is None:
            return None
        table = mapping.table
        result = await self.db.execute(
            select(table.c[mapping.parent_column]).where(table.c.id == node_id)
        )
        return result.scalar_one_or_none()
