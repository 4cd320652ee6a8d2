"""Repository guard and the in-memory TaskRepository."""

import asyncio

import pytest

from taskboard.domain.entities.task import Task
from taskboard.domain.value_objects import OwnerEmail, TaskCriteria, TaskId
from taskboard.errors import PersistenceError
from taskboard.infrastructure.ids import uuid7
from taskboard.infrastructure.persistence import InMemoryTaskRepository, InMemoryTaskStore
from taskboard.infrastructure.persistence.guard import guarded

pytestmark = pytest.mark.asyncio

OWNER = OwnerEmail("owner@example.com")


def make_task(title="Backup database") -> Task:
    return Task.create(task_id=TaskId(str(uuid7())), owner=OWNER, title=title)


class TestGuard:
    async def test_passes_results_through(self):
        async def ok():
            return 42

        assert await guarded("op", ok, timeout=1) == 42

    async def test_driver_failure_becomes_persistence_error(self):
        async def boom():
            raise OSError("socket closed")

        with pytest.raises(PersistenceError) as exc_info:
            await guarded("task.find_by_id", boom, timeout=1)
        assert exc_info.value.operation == "task.find_by_id"
        assert isinstance(exc_info.value.cause, OSError)

    async def test_timeout_is_a_persistence_error(self):
        async def slow():
            await asyncio.sleep(5)

        with pytest.raises(PersistenceError) as exc_info:
            await guarded("task.find_by_conditions", slow, timeout=0.01)
        assert isinstance(exc_info.value.cause, asyncio.TimeoutError)

    async def test_cancelled_write_still_completes(self):
        applied = []
        started = asyncio.Event()

        async def write():
            started.set()
            await asyncio.sleep(0.05)
            applied.append("row")

        request = asyncio.ensure_future(guarded("task.save", write, timeout=1, write=True))
        await started.wait()
        request.cancel()
        with pytest.raises(asyncio.CancelledError):
            await request

        await asyncio.sleep(0.1)
        assert applied == ["row"]


class TestInMemoryTaskRepository:
    async def test_save_and_find(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        task = make_task()
        await repository.save(task)
        found = await repository.find_by_id(task.id)
        assert found == task
        assert found is not task

    async def test_absence_is_none_not_an_error(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        assert await repository.find_by_id(TaskId(str(uuid7()))) is None
        assert await repository.delete(TaskId(str(uuid7()))) is False

    async def test_loaded_entities_are_detached_from_the_store(self):
        store = InMemoryTaskStore()
        repository = InMemoryTaskRepository(store)
        task = make_task()
        await repository.save(task)

        loaded = await repository.find_by_id(task.id)
        loaded.rename("Changed but never stored")
        again = await repository.find_by_id(task.id)
        assert again.title.value == "Backup database"

    async def test_duplicate_save_is_a_persistence_error(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        task = make_task()
        await repository.save(task)
        with pytest.raises(PersistenceError) as exc_info:
            await repository.save(task)
        assert exc_info.value.operation == "task.save"

    async def test_update_is_compare_and_swap(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        task = make_task()
        await repository.save(task)

        task.rename("v2")
        assert await repository.update(task, expected_version=1) is True
        assert task.version == 2
        assert await repository.update(task, expected_version=1) is False
        assert (await repository.find_by_id(task.id)).version == 2

    async def test_update_of_deleted_task(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        task = make_task()
        await repository.save(task)
        assert await repository.delete(task.id) is True
        assert await repository.update(task, expected_version=1) is False

    async def test_corrupt_row_is_reported_as_infrastructure_failure(self):
        store = InMemoryTaskStore()
        repository = InMemoryTaskRepository(store)
        task = make_task()
        await repository.save(task)
        store._rows[task.id.value]["priority"] = "not-a-priority"

        with pytest.raises(PersistenceError):
            await repository.find_by_id(task.id)

    async def test_find_by_conditions(self):
        repository = InMemoryTaskRepository(InMemoryTaskStore())
        for n in range(3):
            await repository.save(make_task(f"Task {n}"))
        await repository.save(
            Task.create(
                task_id=TaskId(str(uuid7())),
                owner=OwnerEmail("someone@else.org"),
                title="Not mine",
            )
        )

        mine = await repository.find_by_conditions(TaskCriteria(owner=OWNER))
        assert len(mine) == 3
        assert all(task.owner == OWNER for task in mine)
        assert len(await repository.find_by_conditions(TaskCriteria(owner=OWNER, limit=2))) == 2
