"""Delete Task Command."""

from dataclasses import dataclass

from taskboard.application.common.access import ENTITY_NAME, load_owned_task
from taskboard.application.common.interfaces import Command, CommandHandler
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.errors import ConflictError


@dataclass(frozen=True)
class DeleteTaskCommand(Command[bool]):
    task_id: str
    actor: str


class DeleteTaskHandler(CommandHandler[bool]):
    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def execute(self, command: DeleteTaskCommand) -> bool:
        task_id = TaskId(command.task_id)
        await load_owned_task(self._repository, task_id, OwnerEmail(command.actor))

        # Loaded a moment ago, so a False here means a concurrent delete won.
        if not await self._repository.delete(task_id):
            raise ConflictError(
                f"{ENTITY_NAME} '{task_id.value}' was deleted by another request"
            )
        return True
