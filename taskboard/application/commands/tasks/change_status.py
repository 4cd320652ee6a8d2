"""Change Task Status Command - move a task through its workflow."""

from dataclasses import dataclass

from taskboard.application.common.access import load_owned_task, save_changes
from taskboard.application.common.interfaces import Command, CommandHandler
from taskboard.application.dto.task import TaskDTO
from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.domain.value_objects.task_status import TaskStatus


@dataclass(frozen=True)
class ChangeTaskStatusCommand(Command[TaskDTO]):
    task_id: str
    actor: str
    status: str


class ChangeTaskStatusHandler(CommandHandler[TaskDTO]):
    def __init__(self, repository: TaskRepository, clock: Clock):
        self._repository = repository
        self._clock = clock

    async def execute(self, command: ChangeTaskStatusCommand) -> TaskDTO:
        target = TaskStatus.parse(command.status)
        task = await load_owned_task(
            self._repository, TaskId(command.task_id), OwnerEmail(command.actor)
        )
        loaded_version = task.version
        task.transition_to(target, now=self._clock.now())
        await save_changes(self._repository, task, loaded_version)
        return TaskDTO.from_entity(task)
