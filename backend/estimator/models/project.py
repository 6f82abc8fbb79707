"""Project model"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from estimator.db.base import Base


class Project(Base):
    """Root of an estimation tree"""
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self):
        return f"<Project {self.id} {self.name}>"
