"""Get Task Query - a single task the actor owns."""

from dataclasses import dataclass

from taskboard.application.common.access import load_owned_task
from taskboard.application.common.interfaces import Query, QueryHandler
from taskboard.application.dto.task import TaskDTO
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId


@dataclass(frozen=True)
class GetTaskQuery(Query[TaskDTO]):
    task_id: str
    actor: str


class GetTaskHandler(QueryHandler[TaskDTO]):
    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def execute(self, query: GetTaskQuery) -> TaskDTO:
        """
        Raises:
            ResourceNotFoundError: If the task doesn't exist
            AuthorizationError: If the actor doesn't own the task
        """
        task = await load_owned_task(
            self._repository, TaskId(query.task_id), OwnerEmail(query.actor)
        )
        return TaskDTO.from_entity(task)
