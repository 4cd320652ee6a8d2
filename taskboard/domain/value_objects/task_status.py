"""
TaskStatus - lifecycle states of a task.
"""

from enum import Enum

from taskboard.errors import DomainValidationError


class TaskStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    ARCHIVED = "archived"

    @classmethod
    def parse(cls, raw: str) -> "TaskStatus":
        try:
            return cls(raw)
        except ValueError:
            raise DomainValidationError(
                "status",
                f"Invalid status: {raw}. Must be one of {[s.value for s in cls]}.",
            ) from None
