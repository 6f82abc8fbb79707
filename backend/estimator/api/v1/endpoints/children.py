"""Parent-scoped endpoints for subprojects, tasks and subtasks"""
from typing import Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from estimator.api.deps import get_estimation_service
from estimator.domains.estimation.domain.entities import Level
from estimator.schemas.hierarchy import (
    DeleteResponse,
    EstimateResponse,
    HoursResponse,
    NodeCreate,
    NodeList,
    NodeResponse,
    NodeUpdate,
    SubTaskCreate,
    SubTaskUpdate,
)
from estimator.services.estimation_service import EstimationService


def build_child_router(
    level: Level,
    parent_path: str,
    path: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
) -> APIRouter:
    """
    Build the CRUD routes for one non-root level.

    Collection and item routes live under the parent
    (``/{parent_path}/{parent_id}/{path}/{node_id}``) so that every read,
    update and delete is checked against the parent in the URL. Hours and
    estimates only need the node id.
    """
    router = APIRouter(tags=[level.label])
    collection = f"/{parent_path}/{{parent_id}}/{path}"
    item = f"{collection}/{{node_id}}"

    @router.get(collection, response_model=NodeList, name=f"list_{path}")
    async def list_nodes(
        parent_id: int,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.list_children(level, parent_id)
        return NodeList.from_nodes(result.value)

    @router.post(
        collection,
        response_model=NodeResponse,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{level.value}",
    )
    async def create_node(
        parent_id: int,
        payload: create_schema,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.create(level, parent_id, **payload.model_dump())
        return NodeResponse.model_validate(result.value)

    @router.get(item, response_model=NodeResponse, name=f"get_{level.value}")
    async def get_node(
        parent_id: int,
        node_id: int,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.get(level, node_id, parent_id=parent_id)
        return NodeResponse.model_validate(result.value)

    @router.put(item, response_model=NodeResponse, name=f"update_{level.value}")
    async def update_node(
        parent_id: int,
        node_id: int,
        payload: update_schema,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.update(
            level,
            node_id,
            payload.model_dump(exclude_unset=True),
            parent_id=parent_id,
        )
        return NodeResponse.model_validate(result.value)

    @router.delete(item, response_model=DeleteResponse, name=f"delete_{level.value}")
    async def delete_node(
        parent_id: int,
        node_id: int,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.delete(level, node_id, parent_id=parent_id)
        return DeleteResponse(level=level, id=node_id, deleted_nodes=result.value)

    @router.get(f"/{path}/{{node_id}}/hours", response_model=HoursResponse, name=f"{level.value}_hours")
    async def get_hours(
        node_id: int,
        service: EstimationService = Depends(get_estimation_service),
    ):
        result = await service.effective_hours(level, node_id)
        return HoursResponse(level=level, id=node_id, effective_hours=result.value)

    if not level.is_leaf:
        @router.get(
            f"/{path}/{{node_id}}/estimate",
            response_model=EstimateResponse,
            name=f"{level.value}_estimate",
        )
        async def get_estimate(
            node_id: int,
            service: EstimationService = Depends(get_estimation_service),
        ):
            result = await service.breakdown(level, node_id)
            return EstimateResponse.from_breakdown(result.value)

    return router


subprojects_router = build_child_router(Level.SUBPROJECT, "projects", "subprojects", NodeCreate, NodeUpdate)
tasks_router = build_child_router(Level.TASK, "subprojects", "tasks", NodeCreate, NodeUpdate)
subtasks_router = build_child_router(Level.SUBTASK, "tasks", "subtasks", SubTaskCreate, SubTaskUpdate)
