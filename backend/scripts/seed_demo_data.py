"""
Seed the database with a demo renovation estimate.

Usage:
    cd backend
    python -m scripts.seed_demo_data
    python -m scripts.seed_demo_data --database-url sqlite+aiosqlite:///./demo.db --create-tables
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from estimator.core.config import settings
from estimator.db.base import Base
from estimator.db.session import enable_sqlite_foreign_keys
from estimator.domains.estimation.domain.entities import Level, TreeNode
from estimator.domains.estimation.infrastructure.repositories import SqlAlchemyGateway
from estimator.infrastructure.observability import configure_logging
from estimator.services.estimation_service import EstimationService
from estimator import models  # noqa: F401

logger = logging.getLogger("estimator.scripts.seed_demo_data")


DEMO_PROJECT: Dict[str, Any] = {
    "name": "Renovation in Copenhagen",
    "description": "Renovation project for 3 homes in Copenhagen.",
    "deadline": date(2025, 12, 17),
    "subprojects": [
        {
            "name": "Lille Langgade 8, 2nd floor",
            "description": "Renovation 1: apartment at Nyhavn",
            "deadline": date(2025, 12, 1),
            "tasks": [
                {
                    "name": "Remove floor",
                    "description": "Remove old flooring and debris",
                    "deadline": date(2025, 11, 20),
                    "subtasks": [
                        {
                            "name": "Tear up floor",
                            "description": "Tear up and dispose of the floor",
                            "deadline": date(2025, 11, 18),
                            "estimated_hours": 6.0,
                        },
                        {
                            "name": "Sort materials",
                            "description": "Sort recycling and waste",
                            "deadline": date(2025, 11, 19),
                            "estimated_hours": 2.0,
                        },
                    ],
                },
                {
                    "name": "New electrical installation",
                    "description": "Upgrade the wiring",
                    "deadline": date(2025, 11, 25),
                    "subtasks": [
                        {
                            "name": "Install fuse board",
                            "description": "Mount new board and fuses",
                            "deadline": date(2025, 11, 24),
                            "estimated_hours": 8.0,
                        },
                    ],
                },
            ],
        },
        {
            "name": "Strandgade 112",
            "description": "Renovation 2: house by Amager Strand",
            "deadline": date(2025, 12, 11),
            "tasks": [
                {
                    "name": "Clean facade",
                    "description": "Clean and repair the facade",
                    "deadline": date(2025, 12, 5),
                    "subtasks": [
                        {
                            "name": "Pressure-wash",
                            "description": "Pressure-wash the facade",
                            "deadline": date(2025, 12, 2),
                            "estimated_hours": 4.5,
                        },
                    ],
                },
            ],
        },
    ],
}

_CHILD_KEYS = {
    Level.PROJECT: "subprojects",
    Level.SUBPROJECT: "tasks",
    Level.TASK: "subtasks",
}


async def _create_subtree(
    service: EstimationService,
    level: Level,
    parent_id: Optional[int],
    data: Dict[str, Any],
) -> TreeNode:
    fields = {key: value for key, value in data.items() if key not in _CHILD_KEYS.values()}
    node = (await service.create(level, parent_id, **fields)).value
    children: List[Dict[str, Any]] = data.get(_CHILD_KEYS.get(level, ""), [])
    for child in children:
        await _create_subtree(service, level.child, node.id, child)
    return node


async def seed_demo_data(service: EstimationService, project: Optional[Dict[str, Any]] = None) -> TreeNode:
    """Create the demo project tree through the service and return the project."""
    created = await _create_subtree(service, Level.PROJECT, None, project or DEMO_PROJECT)
    hours = (await service.effective_hours(Level.PROJECT, created.id)).value
    logger.info("Seeded project %s (%s) with %.1f estimated hours", created.id, created.name, hours)
    return created


async def main(database_url: str, create_tables: bool) -> None:
    engine = create_async_engine(database_url)
    enable_sqlite_foreign_keys(engine)
    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        async with session_factory() as session:
            await seed_demo_data(EstimationService(SqlAlchemyGateway(session)))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo project estimate")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    asyncio.run(main(args.database_url, args.create_tables))
