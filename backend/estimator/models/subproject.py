"""SubProject model"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from estimator.db.base import Base


class SubProject(Base):
    """SubProject model"""
    __tablename__ = "subproject"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("project.id", ondelete="CASCADE", name="fk_subproject_project"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self):
        return f"<SubProject {self.id} {self.name}>"
