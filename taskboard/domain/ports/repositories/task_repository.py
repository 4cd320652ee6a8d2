"""
Task Repository Port - Interface for task persistence.
Implementations:
- taskboard/infrastructure/persistence/memory_task_repository.py
- taskboard/infrastructure/persistence/prisma_task_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from taskboard.domain.entities.task import Task
from taskboard.domain.value_objects.task_criteria import TaskCriteria
from taskboard.domain.value_objects.task_id import TaskId


class TaskRepository(ABC):
    @abstractmethod
    async def save(self, task: Task) -> None:
        """Insert a new task."""

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]: ...

    @abstractmethod
    async def find_by_conditions(self, criteria: TaskCriteria) -> list[Task]:
        """Tasks matching ``criteria``, most recently updated first."""

    @abstractmethod
    async def update(self, task: Task, expected_version: int) -> bool:
        """
        Store ``task`` if the stored version still equals ``expected_version``.

        On success the stored version (and ``task.version``) becomes
        expected_version + 1. Returns False on a version mismatch or when the
        task no longer exists.
        """

    @abstractmethod
    async def delete(self, task_id: TaskId) -> bool:
        """Returns True if a task was deleted."""
