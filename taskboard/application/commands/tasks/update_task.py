"""Update Task Command - edit title, description and/or priority."""

from dataclasses import dataclass
from typing import Optional

from taskboard.application.common.access import load_owned_task, save_changes
from taskboard.application.common.interfaces import Command, CommandHandler
from taskboard.application.dto.task import TaskDTO
from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.errors import ConflictError, UseCaseValidationError


@dataclass(frozen=True)
class UpdateTaskCommand(Command[TaskDTO]):
    task_id: str
    actor: str
    expected_version: int
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None


class UpdateTaskHandler(CommandHandler[TaskDTO]):
    def __init__(self, repository: TaskRepository, clock: Clock):
        self._repository = repository
        self._clock = clock

    async def execute(self, command: UpdateTaskCommand) -> TaskDTO:
        if command.title is None and command.description is None and command.priority is None:
            raise UseCaseValidationError("Nothing to update")
        if command.expected_version < 1:
            raise UseCaseValidationError("expected_version must be at least 1")

        task = await load_owned_task(
            self._repository, TaskId(command.task_id), OwnerEmail(command.actor)
        )
        if task.version != command.expected_version:
            raise ConflictError(
                f"Task '{task.id.value}' is at version {task.version}, "
                f"not {command.expected_version}"
            )

        task.apply_changes(
            title=command.title,
            description=command.description,
            priority=command.priority,
            now=self._clock.now(),
        )
        await save_changes(self._repository, task, command.expected_version)
        return TaskDTO.from_entity(task)
