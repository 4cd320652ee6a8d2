"""
Prisma Task Repository Implementation.

- Implements TaskRepository port from domain layer
- Uses the app-scoped Prisma client (its engine owns the connection pool)
- Maps between Prisma records and domain entities via task_rows
- update() is one conditional update_many on (id, version), so it either
  applies completely or not at all

Schema: prisma/schema.prisma (model Task). The checklist column holds JSON text.
"""

import json
from typing import Any, Optional

from prisma import Prisma

from taskboard.config.settings import Config
from taskboard.domain.entities.task import Task
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.task_criteria import TaskCriteria
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.infrastructure.persistence.guard import guarded
from taskboard.infrastructure.persistence.task_rows import row_to_task, task_to_row


class PrismaTaskRepository(TaskRepository):
    _prisma: Prisma

    def __init__(
        self,
        prisma: Prisma,
        timeout: float = Config.REPOSITORY_TIMEOUT_SECONDS,
    ):
        self._prisma = prisma
        self._timeout = timeout

    def _to_entity(self, record) -> Task:
        """Map Prisma record to domain entity."""
        return row_to_task(
            {
                "id": record.id,
                "owner": record.owner,
                "title": record.title,
                "description": record.description,
                "priority": record.priority,
                "status": record.status,
                "checklist": json.loads(record.checklist or "[]"),
                "version": record.version,
                "created_at": record.created_at,
                "updated_at": record.updated_at,
            }
        )

    def _to_data(self, task: Task) -> dict[str, Any]:
        """Map domain entity to Prisma data dict."""
        row = task_to_row(task)
        row["checklist"] = json.dumps(row["checklist"])
        return row

    async def save(self, task: Task) -> None:
        await guarded(
            "task.save",
            lambda: self._prisma.task.create(data=self._to_data(task)),
            self._timeout,
            write=True,
        )

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        async def _find() -> Optional[Task]:
            record = await self._prisma.task.find_unique(where={"id": task_id.value})
            return self._to_entity(record) if record else None

        return await guarded("task.find_by_id", _find, self._timeout)

    async def find_by_conditions(self, criteria: TaskCriteria) -> list[Task]:
        where: dict[str, Any] = {"owner": criteria.owner.value}
        if criteria.status is not None:
            where["status"] = criteria.status.value
        if criteria.priority is not None:
            where["priority"] = criteria.priority.value

        async def _find_many() -> list[Task]:
            records = await self._prisma.task.find_many(
                where=where,
                order={"updated_at": "desc"},
                take=criteria.limit,
            )
            return [self._to_entity(record) for record in records]

        return await guarded("task.find_by_conditions", _find_many, self._timeout)

    async def update(self, task: Task, expected_version: int) -> bool:
        data = self._to_data(task)
        data.pop("id")
        data.pop("created_at")
        data["version"] = expected_version + 1

        count = await guarded(
            "task.update",
            lambda: self._prisma.task.update_many(
                where={"id": task.id.value, "version": expected_version},
                data=data,
            ),
            self._timeout,
            write=True,
        )
        if count == 0:
            return False
        task.version = expected_version + 1
        return True

    async def delete(self, task_id: TaskId) -> bool:
        count = await guarded(
            "task.delete",
            lambda: self._prisma.task.delete_many(where={"id": task_id.value}),
            self._timeout,
            write=True,
        )
        return count > 0
