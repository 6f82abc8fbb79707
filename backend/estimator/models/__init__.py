"""ORM models for the four hierarchy tables"""
from estimator.models.project import Project
from estimator.models.subproject import SubProject
from estimator.models.task import Task
from estimator.models.subtask import SubTask

__all__ = ["Project", "SubProject", "Task", "SubTask"]
