"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateTaskCommand(Command[TaskId]):
        actor: str
        title: str

    class CreateTaskHandler(CommandHandler[TaskId]):
        def __init__(self, repository: TaskRepository, id_generator: IdGenerator, clock: Clock):
            ...

        async def execute(self, command: CreateTaskCommand) -> TaskId:
            task = Task.create(self._id_generator.new_id(), ...)
            await self._repository.save(task)
            return task.id
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
