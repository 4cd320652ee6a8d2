"""List Tasks Query - the actor's tasks, optionally filtered."""

from dataclasses import dataclass
from typing import Optional

from taskboard.application.common.interfaces import Query, QueryHandler
from taskboard.application.dto.task import TaskDTO, TaskListDTO
from taskboard.config.settings import Config
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_criteria import MAX_LIMIT, TaskCriteria
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.errors import UseCaseValidationError


@dataclass(frozen=True)
class ListTasksQuery(Query[TaskListDTO]):
    actor: str
    status: Optional[str] = None
    priority: Optional[str] = None
    limit: int = Config.TASK_LIST_DEFAULT_LIMIT


class ListTasksHandler(QueryHandler[TaskListDTO]):
    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def execute(self, query: ListTasksQuery) -> TaskListDTO:
        if not 1 <= query.limit <= MAX_LIMIT:
            raise UseCaseValidationError(f"limit must be between 1 and {MAX_LIMIT}")

        criteria = TaskCriteria(
            owner=OwnerEmail(query.actor),
            status=TaskStatus.parse(query.status) if query.status else None,
            priority=Priority(query.priority) if query.priority else None,
            limit=query.limit,
        )
        tasks = await self._repository.find_by_conditions(criteria)
        return TaskListDTO(
            tasks=[TaskDTO.from_entity(task) for task in tasks],
            total=len(tasks),
        )
