"""Projects endpoints"""
from fastapi import APIRouter, Depends, status

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
)
from estimator.services.estimation_service import EstimationService

router = APIRouter()


@router.get("", response_model=NodeList)
async def list_projects(
    service: EstimationService = Depends(get_estimation_service),
):
    """List all projects, ordered by id"""
    projects = await service.list_projects()
    return NodeList.from_nodes(projects)


@router.post("", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: NodeCreate,
    service: EstimationService = Depends(get_estimation_service),
):
    """Create a new project"""
    result = await service.create(
        Level.PROJECT,
        None,
        name=payload.name,
        description=payload.description,
        deadline=payload.deadline,
    )
    return NodeResponse.model_validate(result.value)


@router.get("/{project_id}", response_model=NodeResponse)
async def get_project(
    project_id: int,
    service: EstimationService = Depends(get_estimation_service),
):
    result = await service.get(Level.PROJECT, project_id)
    return NodeResponse.model_validate(result.value)


@router.put("/{project_id}", response_model=NodeResponse)
async def update_project(
    project_id: int,
    payload: NodeUpdate,
    service: EstimationService = Depends(get_estimation_service),
):
    """Update name, description or deadline of a project"""
    result = await service.update(Level.PROJECT, project_id, payload.model_dump(exclude_unset=True))
    return NodeResponse.model_validate(result.value)


@router.delete("/{project_id}", response_model=DeleteResponse)
async def delete_project(
    project_id: int,
    service: EstimationService = Depends(get_estimation_service),
):
    """Delete a project together with every subproject, task and subtask under it"""
    result = await service.delete(Level.PROJECT, project_id)
    return DeleteResponse(level=Level.PROJECT, id=project_id, deleted_nodes=result.value)


@router.get("/{project_id}/hours", response_model=HoursResponse)
async def get_project_hours(
    project_id: int,
    service: EstimationService = Depends(get_estimation_service),
):
    result = await service.effective_hours(Level.PROJECT, project_id)
    return HoursResponse(level=Level.PROJECT, id=project_id, effective_hours=result.value)


@router.get("/{project_id}/estimate", response_model=EstimateResponse)
async def get_project_estimate(
    project_id: int,
    service: EstimationService = Depends(get_estimation_service),
):
    """Whole project tree with rolled-up hours at every level"""
    result = await service.breakdown(Level.PROJECT, project_id)
    return EstimateResponse.from_breakdown(result.value)
