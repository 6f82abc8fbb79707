"""API v1 router"""
from fastapi import APIRouter

from estimator.api.v1.endpoints import projects
from estimator.api.v1.endpoints.children import subprojects_router, subtasks_router, tasks_router

api_router = APIRouter()
api_router.include_router(projects.router, prefix="/projects", tags=["Project"])
api_router.include_router(subprojects_router)
api_router.include_router(tasks_router)
api_router.include_router(subtasks_router)
