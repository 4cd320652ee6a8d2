"""
IdGenerator Port - produces identifiers for new entities.
Implementation: taskboard/infrastructure/ids.py

Identifiers must be unique, unguessable and time-orderable. Handlers call
new_id() exactly once per entity they create.
"""

from abc import ABC, abstractmethod

from taskboard.domain.value_objects.task_id import TaskId


class IdGenerator(ABC):
    @abstractmethod
    def new_id(self) -> TaskId: ...
