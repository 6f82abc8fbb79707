import os
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import pytest_asyncio

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from estimator import models  # noqa: E402,F401
from estimator.db.base import Base  # noqa: E402
from estimator.db.session import enable_sqlite_foreign_keys  # noqa: E402
from estimator.domains.estimation.domain.entities import Level, TreeNode  # noqa: E402
from estimator.domains.estimation.domain.gateway import PersistenceGateway  # noqa: E402


class InMemoryGateway(PersistenceGateway):
    """Dict-backed gateway with the same cascade and row-count semantics as the database."""

    def __init__(self):
        self.nodes: Dict[Level, Dict[int, TreeNode]] = {level: {} for level in Level}
        self.next_id = 1
        self.calls: List[str] = []

    async def find_by_id(self, level: Level, node_id: int) -> Optional[TreeNode]:
        self.calls.append("find_by_id")
        return self.nodes[level].get(node_id)

    async def find_by_parent_id(self, level: Level, parent_id: int) -> List[TreeNode]:
        self.calls.append("find_by_parent_id")
        children = [node for node in self.nodes[level].values() if node.parent_id == parent_id]
        return sorted(children, key=lambda node: node.id)

    async def find_all(self, level: Level) -> List[TreeNode]:
        return sorted(self.nodes[level].values(), key=lambda node: node.id)

    async def insert(self, node: TreeNode) -> int:
        self.calls.append("insert")
        node_id = self.next_id
        self.next_id += 1
        self.nodes[node.level][node_id] = node.with_id(node_id)
        return node_id

    async def update(self, node: TreeNode) -> int:
        self.calls.append("update")
        if node.id not in self.nodes[node.level]:
            return 0
        self.nodes[node.level][node.id] = node
        return 1

    async def delete_by_id(self, level: Level, node_id: int) -> int:
        self.calls.append("delete_by_id")
        if self.nodes[level].pop(node_id, None) is None:
            return 0
        if not level.is_leaf:
            children = [n for n in self.nodes[level.child].values() if n.parent_id == node_id]
            for child in children:
                await self.delete_by_id(level.child, child.id)
        return 1

    async def exists_by_id(self, level: Level, node_id: int) -> bool:
        return node_id in self.nodes[level]

    async def parent_id_of(self, level: Level, node_id: int) -> Optional[int]:
        self.calls.append("parent_id_of")
        node = self.nodes[level].get(node_id)
        return node.parent_id if node else None

    def add(self, level: Level, parent_id: Optional[int] = None, **fields) -> TreeNode:
        """Store a node directly, for arranging test trees."""
        fields.setdefault("name", f"{level.label} {self.next_id}")
        node = TreeNode(level=level, parent_id=parent_id, id=self.next_id, **fields)
        self.nodes[level][node.id] = node
        self.next_id += 1
        return node

    def count(self) -> int:
        return sum(len(nodes) for nodes in self.nodes.values())


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def renovation(gateway):
    """Renovation → House A → Remove floor (6.0h + 2.0h), House B → Clean facade (4.5h)."""
    project = gateway.add(Level.PROJECT, name="Renovation", deadline=date(2025, 12, 17))
    house_a = gateway.add(Level.SUBPROJECT, project.id, name="House A")
    remove_floor = gateway.add(Level.TASK, house_a.id, name="Remove floor")
    tear_up = gateway.add(Level.SUBTASK, remove_floor.id, name="Tear up floor", estimated_hours=6.0)
    sort_materials = gateway.add(Level.SUBTASK, remove_floor.id, name="Sort materials", estimated_hours=2.0)
    house_b = gateway.add(Level.SUBPROJECT, project.id, name="House B")
    facade = gateway.add(Level.TASK, house_b.id, name="Clean facade")
    wash = gateway.add(Level.SUBTASK, facade.id, name="Pressure-wash", estimated_hours=4.5)
    return {
        "project": project,
        "house_a": house_a,
        "remove_floor": remove_floor,
        "tear_up": tear_up,
        "sort_materials": sort_materials,
        "house_b": house_b,
        "facade": facade,
        "wash": wash,
    }


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
