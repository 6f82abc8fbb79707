"""Create project, subproject, task and subtask tables

Revision ID: create_hierarchy_tables_001
Revises:
Create Date: 2026-10-16

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "create_hierarchy_tables_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "project",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
    )

    op.create_table(
        "subproject",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["project.id"], name="fk_subproject_project", ondelete="CASCADE"),
    )
    op.create_index("ix_subproject_project_id", "subproject", ["project_id"])

    op.create_table(
        "task",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("subproject_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["subproject_id"], ["subproject.id"], name="fk_task_subproject", ondelete="CASCADE"),
    )
    op.create_index("ix_task_subproject_id", "task", ["subproject_id"])

    op.create_table(
        "subtask",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("task_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("estimated_hours", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(["task_id"], ["task.id"], name="fk_subtask_task", ondelete="CASCADE"),
        sa.CheckConstraint("estimated_hours > 0", name="ck_subtask_estimated_hours_positive"),
    )
    op.create_index("ix_subtask_task_id", "subtask", ["task_id"])


def downgrade() -> None:
    op.drop_index("ix_subtask_task_id", table_name="subtask")
    op.drop_table("subtask")
    op.drop_index("ix_task_subproject_id", table_name="task")
    op.drop_table("task")
    op.drop_index("ix_subproject_project_id", table_name="subproject")
    op.drop_table("subproject")
    op.drop_table("project")
