import pytest

from estimator.domains.estimation.domain.entities import Level
from estimator.domains.estimation.domain.validator import HierarchyValidator
from estimator.shared_kernel.exceptions import (
    EntityNotFoundError,
    OwnershipMismatchError,
    ParentNotFoundError,
)


@pytest.mark.asyncio
async def test_parent_exists_for_each_level(gateway, renovation):
    validator = HierarchyValidator(gateway)

    assert (await validator.validate_parent_exists(renovation["project"].id, Level.SUBPROJECT)).is_success
    assert (await validator.validate_parent_exists(renovation["house_a"].id, Level.TASK)).is_success
    assert (await validator.validate_parent_exists(renovation["facade"].id, Level.SUBTASK)).is_success
    assert (await validator.validate_parent_exists(None, Level.PROJECT)).is_success


@pytest.mark.asyncio
async def test_missing_parent_fails(gateway, renovation):
    result = await HierarchyValidator(gateway).validate_parent_exists(999, Level.TASK)

    assert result.is_failure
    assert isinstance(result.error, ParentNotFoundError)
    assert result.error.details == {"level": "SubProject", "parent_id": 999}


@pytest.mark.asyncio
async def test_parent_of_wrong_level_fails(gateway, renovation):
    # The id of a task is not a valid subproject id.
    result = await HierarchyValidator(gateway).validate_parent_exists(renovation["facade"].id, Level.TASK)

    assert isinstance(result.error, ParentNotFoundError)


@pytest.mark.asyncio
async def test_project_with_parent_fails(gateway):
    result = await HierarchyValidator(gateway).validate_parent_exists(1, Level.PROJECT)

    assert isinstance(result.error, ParentNotFoundError)


@pytest.mark.asyncio
async def test_ownership_returns_child(gateway, renovation):
    result = await HierarchyValidator(gateway).validate_ownership(
        Level.TASK, renovation["remove_floor"].id, renovation["house_a"].id
    )

    assert result.value == renovation["remove_floor"]


@pytest.mark.asyncio
async def test_ownership_mismatch(gateway, renovation):
    result = await HierarchyValidator(gateway).validate_ownership(
        Level.TASK, renovation["remove_floor"].id, renovation["house_b"].id
    )

    assert isinstance(result.error, OwnershipMismatchError)
    assert result.error.details["actual_parent_id"] == renovation["house_a"].id


@pytest.mark.asyncio
async def test_ownership_of_missing_child(gateway, renovation):
    result = await HierarchyValidator(gateway).validate_ownership(Level.SUBTASK, 999, renovation["facade"].id)

    assert isinstance(result.error, EntityNotFoundError)


@pytest.mark.asyncio
async def test_cascade_delete_counts_whole_subtree(gateway, renovation):
    removed = await HierarchyValidator(gateway).cascade_delete(renovation["house_a"].id, Level.SUBPROJECT)

    assert removed == 4
    assert gateway.count() == 4
    assert await gateway.find_by_id(Level.SUBTASK, renovation["tear_up"].id) is None
    assert await gateway.find_by_id(Level.SUBTASK, renovation["wash"].id) is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("n,m,k", [(1, 1, 1), (2, 3, 4), (3, 0, 0), (2, 2, 0)])
async def test_cascade_delete_project_removes_every_descendant(gateway, n, m, k):
    project = gateway.add(Level.PROJECT)
    for _ in range(n):
        sub = gateway.add(Level.SUBPROJECT, project.id)
        for _ in range(m):
            task = gateway.add(Level.TASK, sub.id)
            for _ in range(k):
                gateway.add(Level.SUBTASK, task.id, estimated_hours=1.0)

    removed = await HierarchyValidator(gateway).cascade_delete(project.id, Level.PROJECT)

    assert removed == 1 + n + n * m + n * m * k
    assert gateway.count() == 0


@pytest.mark.asyncio
async def test_cascade_delete_of_missing_id_returns_zero(gateway):
    assert await HierarchyValidator(gateway).cascade_delete(42, Level.PROJECT) == 0


@pytest.mark.asyncio
async def test_cascade_delete_reports_zero_when_removed_concurrently(gateway, renovation):
    class RacingGateway(type(gateway)):
        async def delete_by_id(self, level, node_id):
            return 0

    racing = RacingGateway()
    racing.nodes = gateway.nodes

    assert await HierarchyValidator(racing).cascade_delete(renovation["project"].id, Level.PROJECT) == 0


@pytest.mark.asyncio
async def test_owner_id_check_reads_only_parent_id(gateway, renovation):
    validator = HierarchyValidator(gateway)
    gateway.calls.clear()

    owned = await validator.validate_owner_id(Level.SUBTASK, renovation["wash"].id, renovation["facade"].id)
    wrong = await validator.validate_owner_id(Level.SUBTASK, renovation["wash"].id, renovation["remove_floor"].id)
    missing = await validator.validate_owner_id(Level.TASK, 999, renovation["house_a"].id)
    root = await validator.validate_owner_id(Level.PROJECT, renovation["project"].id, 1)

    assert owned.value == renovation["wash"].id
    assert isinstance(wrong.error, OwnershipMismatchError)
    assert wrong.error.details["actual_parent_id"] == renovation["facade"].id
    assert isinstance(missing.error, EntityNotFoundError)
    assert isinstance(root.error, EntityNotFoundError)
    assert set(gateway.calls) == {"parent_id_of"}
