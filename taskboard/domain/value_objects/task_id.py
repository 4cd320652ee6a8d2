"""
TaskId Value Object - UUID string identifying a task.
"""

from dataclasses import dataclass
from uuid import UUID

from taskboard.errors import DomainValidationError


@dataclass(frozen=True)
class TaskId:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("id", "Task id cannot be empty")
        try:
            UUID(self.value)
        except ValueError:
            raise DomainValidationError(
                "id", f"Invalid task id (UUID expected): {self.value}"
            ) from None

    def __str__(self) -> str:
        return self.value
