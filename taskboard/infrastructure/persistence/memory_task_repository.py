"""
In-memory TaskRepository.

InMemoryTaskStore is created once per process (app scope) and plays the part
of the database: it holds row snapshots, never live entities, so a request
that mutates a loaded Task changes nothing until update() succeeds. Each
store method runs without awaiting, so every operation applies as one step.

InMemoryTaskRepository is created per request and only borrows the store.
"""

import copy
import logging
from typing import Any, Callable, Optional

from taskboard.config.settings import Config
from taskboard.domain.entities.task import Task
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_criteria import TaskCriteria
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.infrastructure.persistence.guard import guarded
from taskboard.infrastructure.persistence.task_rows import row_to_task, task_to_row

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class DuplicateKeyError(Exception):
    pass


class InMemoryTaskStore:
    def __init__(self):
        self._rows: dict[str, Row] = {}

    def insert(self, row: Row) -> None:
        if row["id"] in self._rows:
            raise DuplicateKeyError(f"Row {row['id']} already exists")
        self._rows[row["id"]] = copy.deepcopy(row)

    def get(self, row_id: str) -> Optional[Row]:
        row = self._rows.get(row_id)
        return copy.deepcopy(row) if row is not None else None

    def select(self, predicate: Callable[[Row], bool]) -> list[Row]:
        return [copy.deepcopy(row) for row in self._rows.values() if predicate(row)]

    def compare_and_swap(self, row: Row, expected_version: int) -> bool:
        current = self._rows.get(row["id"])
        if current is None or current["version"] != expected_version:
            return False
        self._rows[row["id"]] = copy.deepcopy(row)
        return True

    def remove(self, row_id: str) -> bool:
        return self._rows.pop(row_id, None) is not None

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryTaskRepository(TaskRepository):
    def __init__(
        self,
        store: InMemoryTaskStore,
        timeout: float = Config.REPOSITORY_TIMEOUT_SECONDS,
    ):
        self._store = store
        self._timeout = timeout

    async def save(self, task: Task) -> None:
        async def _insert() -> None:
            self._store.insert(task_to_row(task))

        await guarded("task.save", _insert, self._timeout, write=True)

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        async def _get() -> Optional[Task]:
            row = self._store.get(task_id.value)
            return row_to_task(row) if row is not None else None

        return await guarded("task.find_by_id", _get, self._timeout)

    async def find_by_conditions(self, criteria: TaskCriteria) -> list[Task]:
        async def _select() -> list[Task]:
            rows = self._store.select(
                lambda row: row["owner"] == criteria.owner.value
                and criteria.matches(TaskStatus(row["status"]), Priority(row["priority"]))
            )
            rows.sort(key=lambda row: row["updated_at"], reverse=True)
            return [row_to_task(row) for row in rows[: criteria.limit]]

        return await guarded("task.find_by_conditions", _select, self._timeout)

    async def update(self, task: Task, expected_version: int) -> bool:
        async def _swap() -> bool:
            row = task_to_row(task)
            row["version"] = expected_version + 1
            swapped = self._store.compare_and_swap(row, expected_version)
            if swapped:
                task.version = expected_version + 1
            return swapped

        return await guarded("task.update", _swap, self._timeout, write=True)

    async def delete(self, task_id: TaskId) -> bool:
        async def _remove() -> bool:
            return self._store.remove(task_id.value)

        return await guarded("task.delete", _remove, self._timeout, write=True)
