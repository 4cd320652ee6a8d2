"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass)
- Validates itself on creation and raises DomainValidationError
"""

from taskboard.domain.value_objects.task_id import TaskId
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_title import TaskTitle
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.domain.value_objects.checklist_item import ChecklistItem
from taskboard.domain.value_objects.task_criteria import TaskCriteria

__all__ = [
    "TaskId",
    "OwnerEmail",
    "TaskTitle",
    "Priority",
    "TaskStatus",
    "ChecklistItem",
    "TaskCriteria",
]
