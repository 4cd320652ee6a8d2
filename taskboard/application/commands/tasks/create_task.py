"""
Create Task Command.

- Command: frozen dataclass holding plain input values
- Handler: receives collaborators via __init__ (DI)
- The id is generated here, once per task, never by the caller or storage
- Returns: TaskId
"""

from dataclasses import dataclass

from taskboard.application.common.interfaces import Command, CommandHandler
from taskboard.domain.entities.task import Task
from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.id_generator import IdGenerator
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId


@dataclass(frozen=True)
class CreateTaskCommand(Command[TaskId]):
    actor: str
    title: str
    description: str = ""
    priority: str = "normal"


class CreateTaskHandler(CommandHandler[TaskId]):
    def __init__(
        self,
        repository: TaskRepository,
        id_generator: IdGenerator,
        clock: Clock,
    ):
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    async def execute(self, command: CreateTaskCommand) -> TaskId:
        owner = OwnerEmail(command.actor)
        task = Task.create(
            task_id=self._id_generator.new_id(),
            owner=owner,
            title=command.title,
            description=command.description,
            priority=command.priority,
            now=self._clock.now(),
        )
        await self._repository.save(task)
        return task.id
