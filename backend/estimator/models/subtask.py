"""SubTask model"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from estimator.db.base import Base


class SubTask(Base):
    """Leaf of the estimation tree; the only row carrying hours"""
    __tablename__ = "subtask"
    __table_args__ = (
        CheckConstraint("estimated_hours > 0", name="ck_subtask_estimated_hours_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("task.id", ondelete="CASCADE", name="fk_subtask_task"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    estimated_hours: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self):
        return f"<SubTask {self.id} {self.name} {self.estimated_hours}h>"
