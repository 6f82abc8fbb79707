"""Pydantic schemas for request/response validation"""
from estimator.schemas.hierarchy import (
    NodeCreate,
    SubTaskCreate,
    NodeUpdate,
    SubTaskUpdate,
    NodeResponse,
    NodeList,
    HoursResponse,
    DeleteResponse,
    EstimateResponse,
)

__all__ = [
    "NodeCreate",
    "SubTaskCreate",
    "NodeUpdate",
    "SubTaskUpdate",
    "NodeResponse",
    "NodeList",
    "HoursResponse",
    "DeleteResponse",
    "EstimateResponse",
]
