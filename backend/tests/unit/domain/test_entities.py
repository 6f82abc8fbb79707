from datetime import date, datetime

import pytest

from estimator.domains.estimation.domain.entities import EstimateBreakdown, Level, TreeNode
from estimator.shared_kernel.exceptions import ValidationError


def test_level_order_and_neighbours():
    assert Level.PROJECT.parent is None
    assert Level.PROJECT.child is Level.SUBPROJECT
    assert Level.TASK.parent is Level.SUBPROJECT
    assert Level.SUBTASK.child is None
    assert Level.SUBTASK.is_leaf
    assert Level.PROJECT.is_root
    assert Level.SUBPROJECT.descendants() == [Level.TASK, Level.SUBTASK]


def test_project_strips_name_and_drops_empty_description():
    project = TreeNode(level=Level.PROJECT, name="  Renovation  ", description="")
    assert project.name == "Renovation"
    assert project.description is None
    assert project.id is None


@pytest.mark.parametrize("name", ["", "   ", "x" * 51])
def test_invalid_name_is_rejected(name):
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.PROJECT, name=name)
    assert exc_info.value.field == "name"


def test_name_at_limit_is_accepted():
    assert TreeNode(level=Level.PROJECT, name="x" * 50).name == "x" * 50


def test_description_over_limit_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.PROJECT, name="P", description="d" * 201)
    assert exc_info.value.field == "description"
    assert exc_info.value.code == "validation_error"


def test_datetime_deadline_is_truncated_to_date():
    node = TreeNode(level=Level.PROJECT, name="P", deadline=datetime(2025, 12, 17, 15, 30))
    assert node.deadline == date(2025, 12, 17)


def test_non_date_deadline_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.PROJECT, name="P", deadline="2025-12-17")
    assert exc_info.value.field == "deadline"


def test_project_cannot_have_parent():
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.PROJECT, name="P", parent_id=1)
    assert exc_info.value.field == "parent_id"


@pytest.mark.parametrize("level", [Level.SUBPROJECT, Level.TASK, Level.SUBTASK])
def test_child_levels_require_parent(level):
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=level, name="Child", estimated_hours=1.0 if level.is_leaf else None)
    assert exc_info.value.field == "parent_id"


@pytest.mark.parametrize("hours", [None, 0, 0.0, -1.5, float("nan"), float("inf"), "3", True])
def test_subtask_hours_must_be_positive_number(hours):
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.SUBTASK, name="Sort materials", parent_id=1, estimated_hours=hours)
    assert exc_info.value.field == "estimated_hours"


@pytest.mark.parametrize("hours", [0.25, 2, 6.0])
def test_subtask_with_positive_hours_is_valid(hours):
    node = TreeNode(level=Level.SUBTASK, name="Sort materials", parent_id=1, estimated_hours=hours)
    assert node.estimated_hours == float(hours)
    assert isinstance(node.estimated_hours, float)


@pytest.mark.parametrize("level", [Level.PROJECT, Level.SUBPROJECT, Level.TASK])
def test_non_leaf_levels_do_not_carry_hours(level):
    parent_id = None if level.is_root else 1
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=level, name="N", parent_id=parent_id, estimated_hours=3.0)
    assert exc_info.value.field == "estimated_hours"


def test_level_accepts_string_value():
    assert TreeNode(level="task", name="T", parent_id=2).level is Level.TASK


def test_with_changes_keeps_identity_and_revalidates():
    node = TreeNode(level=Level.SUBTASK, name="Tear up floor", parent_id=3, estimated_hours=6.0, id=7)

    changed = node.with_changes(name="Tear up old floor", estimated_hours=7.5)

    assert changed.id == 7
    assert changed.parent_id == 3
    assert changed.level is Level.SUBTASK
    assert changed.estimated_hours == 7.5
    assert node.estimated_hours == 6.0

    with pytest.raises(ValidationError):
        node.with_changes(estimated_hours=0)


def test_with_changes_can_clear_optional_fields():
    node = TreeNode(level=Level.PROJECT, name="P", description="d", deadline=date(2025, 1, 1), id=1)
    cleared = node.with_changes(description=None, deadline=None)
    assert cleared.description is None
    assert cleared.deadline is None
    assert cleared.name == "P"


def test_breakdown_walk_counts_every_node():
    project = TreeNode(level=Level.PROJECT, name="P", id=1)
    sub = TreeNode(level=Level.SUBPROJECT, name="S", parent_id=1, id=2)
    tree = EstimateBreakdown(node=project, children=[EstimateBreakdown(node=sub)])
    assert tree.count() == 2
    assert [b.node.id for b in tree.walk()] == [1, 2]


@pytest.mark.parametrize("description", [123, 4.5, ["floor"]])
def test_non_text_description_is_rejected(description):
    with pytest.raises(ValidationError) as exc_info:
        TreeNode(level=Level.PROJECT, name="P", description=description)
    assert exc_info.value.field == "description"
