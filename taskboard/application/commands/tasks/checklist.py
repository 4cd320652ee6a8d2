"""Checklist Commands - add an item, tick an item off."""

from dataclasses import dataclass

from taskboard.application.common.access import load_owned_task, save_changes
from taskboard.application.common.interfaces import Command, CommandHandler
from taskboard.application.dto.task import TaskDTO
from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId


@dataclass(frozen=True)
class AddChecklistItemCommand(Command[TaskDTO]):
    task_id: str
    actor: str
    text: str


@dataclass(frozen=True)
class CompleteChecklistItemCommand(Command[TaskDTO]):
    task_id: str
    actor: str
    position: int


class AddChecklistItemHandler(CommandHandler[TaskDTO]):
    def __init__(self, repository: TaskRepository, clock: Clock):
        self._repository = repository
        self._clock = clock

    async def execute(self, command: AddChecklistItemCommand) -> TaskDTO:
        task = await load_owned_task(
            self._repository, TaskId(command.task_id), OwnerEmail(command.actor)
        )
        loaded_version = task.version
        task.add_checklist_item(command.text, now=self._clock.now())
        await save_changes(self._repository, task, loaded_version)
        return TaskDTO.from_entity(task)


class CompleteChecklistItemHandler(CommandHandler[TaskDTO]):
    def __init__(self, repository: TaskRepository, clock: Clock):
        self._repository = repository
        self._clock = clock

    async def execute(self, command: CompleteChecklistItemCommand) -> TaskDTO:
        task = await load_owned_task(
            self._repository, TaskId(command.task_id), OwnerEmail(command.actor)
        )
        loaded_version = task.version
        task.complete_checklist_item(command.position, now=self._clock.now())
        await save_changes(self._repository, task, loaded_version)
        return TaskDTO.from_entity(task)
