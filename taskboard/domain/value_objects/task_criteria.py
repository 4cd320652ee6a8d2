"""
TaskCriteria Value Object - filter for TaskRepository.find_by_conditions.
"""

from dataclasses import dataclass
from typing import Optional

from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.errors import DomainValidationError

MAX_LIMIT = 200


@dataclass(frozen=True)
class TaskCriteria:
    owner: OwnerEmail
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    limit: int = 50

    def __post_init__(self):
        if not isinstance(self.owner, OwnerEmail):
            raise DomainValidationError("owner", "Criteria owner must be an OwnerEmail")
        if self.status is not None and not isinstance(self.status, TaskStatus):
            raise DomainValidationError("status", f"Invalid status: {self.status}")
        if self.priority is not None and not isinstance(self.priority, Priority):
            raise DomainValidationError("priority", f"Invalid priority: {self.priority}")
        if (
            isinstance(self.limit, bool)
            or not isinstance(self.limit, int)
            or not 1 <= self.limit <= MAX_LIMIT
        ):
            raise DomainValidationError(
                "limit", f"Limit must be an integer between 1 and {MAX_LIMIT}"
            )

    def matches(self, status: TaskStatus, priority: Priority) -> bool:
        if self.status is not None and status is not self.status:
            return False
        if self.priority is not None and priority != self.priority:
            return False
        return True
