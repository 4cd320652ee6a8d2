"""
Task Entity - a unit of work owned by one user.

Lifecycle:
    open ──> in_progress ──> done
      │  <──     │     <──────┘
      └──────────┴──────────────> archived (final, read-only)

Every mutating method validates all of its inputs before assigning anything,
so a failed call leaves the task exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from taskboard.domain.value_objects.checklist_item import ChecklistItem
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.domain.value_objects.task_title import TaskTitle
from taskboard.errors import (
    AggregateConsistencyError,
    BusinessRuleViolationError,
    DomainValidationError,
    WorkflowError,
)

MAX_DESCRIPTION_LENGTH = 2000
MAX_CHECKLIST_ITEMS = 25

ALLOWED_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.OPEN: frozenset({TaskStatus.IN_PROGRESS, TaskStatus.ARCHIVED}),
    TaskStatus.IN_PROGRESS: frozenset(
        {TaskStatus.OPEN, TaskStatus.DONE, TaskStatus.ARCHIVED}
    ),
    TaskStatus.DONE: frozenset({TaskStatus.OPEN, TaskStatus.ARCHIVED}),
    TaskStatus.ARCHIVED: frozenset(),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validated_description(description: str) -> str:
    if not isinstance(description, str):
        raise DomainValidationError("description", "Description must be a string")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise DomainValidationError(
            "description",
            f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
        )
    return description


def _validated_checklist(items: tuple[ChecklistItem, ...]) -> tuple[ChecklistItem, ...]:
    if len(items) > MAX_CHECKLIST_ITEMS:
        raise AggregateConsistencyError(
            f"A task cannot hold more than {MAX_CHECKLIST_ITEMS} checklist items"
        )
    seen: set[str] = set()
    for item in items:
        key = item.text.casefold()
        if key in seen:
            raise AggregateConsistencyError(
                f"Checklist item '{item.text}' appears more than once"
            )
        seen.add(key)
    return items


@dataclass
class Task:
    id: TaskId
    owner: OwnerEmail
    title: TaskTitle
    created_at: datetime
    updated_at: datetime
    description: str = ""
    priority: Priority = field(default_factory=Priority)
    status: TaskStatus = TaskStatus.OPEN
    checklist: tuple[ChecklistItem, ...] = ()
    version: int = 1

    def __post_init__(self):
        if not isinstance(self.id, TaskId):
            if not self.id:
                raise DomainValidationError("id", "Task id cannot be empty")
            raise DomainValidationError("id", "Task id must be a TaskId")
        if not isinstance(self.owner, OwnerEmail):
            raise DomainValidationError("owner", "Task owner must be an OwnerEmail")
        if not isinstance(self.title, TaskTitle):
            raise DomainValidationError("title", "Task title must be a TaskTitle")
        if not isinstance(self.priority, Priority):
            raise DomainValidationError("priority", "Task priority must be a Priority")
        if not isinstance(self.status, TaskStatus):
            raise DomainValidationError("status", "Task status must be a TaskStatus")
        if isinstance(self.version, bool) or not isinstance(self.version, int) or self.version < 1:
            raise DomainValidationError("version", "Version must be a positive integer")
        _validated_description(self.description)
        self.checklist = _validated_checklist(tuple(self.checklist))
        if self.status is TaskStatus.DONE and self.open_items:
            raise BusinessRuleViolationError(
                "checklist_must_be_complete",
                "A done task cannot have open checklist items",
            )

    @classmethod
    def create(
        cls,
        task_id: TaskId,
        owner: OwnerEmail,
        title: str,
        description: str = "",
        priority: str = "normal",
        now: Optional[datetime] = None,
    ) -> Task:
        """Factory for a brand-new task. The id comes from the caller's IdGenerator."""
        now = now or _utcnow()
        return cls(
            id=task_id,
            owner=owner,
            title=TaskTitle(title),
            description=description,
            priority=Priority(priority),
            created_at=now,
            updated_at=now,
        )

    # ==================== QUERIES ====================

    @property
    def open_items(self) -> list[ChecklistItem]:
        return [item for item in self.checklist if not item.done]

    def is_owned_by(self, owner: OwnerEmail) -> bool:
        return self.owner == owner

    # ==================== MUTATIONS ====================

    def apply_changes(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> None:
        """Edit several fields at once; either all of them change or none."""
        self._ensure_editable()
        new_title = TaskTitle(title) if title is not None else self.title
        new_description = (
            _validated_description(description)
            if description is not None
            else self.description
        )
        new_priority = Priority(priority) if priority is not None else self.priority

        self.title = new_title
        self.description = new_description
        self.priority = new_priority
        self._touch(now)

    def rename(self, title: str, now: Optional[datetime] = None) -> None:
        self.apply_changes(title=title, now=now)

    def describe(self, description: str, now: Optional[datetime] = None) -> None:
        self.apply_changes(description=description, now=now)

    def reprioritize(self, priority: str, now: Optional[datetime] = None) -> None:
        self.apply_changes(priority=priority, now=now)

    def transition_to(self, status: TaskStatus, now: Optional[datetime] = None) -> None:
        if status is self.status:
            raise WorkflowError(
                f"Task is already {self.status.value}",
                current=self.status.value,
                requested=status.value,
            )
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise WorkflowError(
                f"Cannot move a task from {self.status.value} to {status.value}",
                current=self.status.value,
                requested=status.value,
            )
        if status is TaskStatus.DONE and self.open_items:
            raise BusinessRuleViolationError(
                "checklist_must_be_complete",
                f"Task has {len(self.open_items)} open checklist item(s)",
            )
        self.status = status
        self._touch(now)

    def add_checklist_item(self, text: str, now: Optional[datetime] = None) -> ChecklistItem:
        self._ensure_editable()
        if self.status is TaskStatus.DONE:
            raise BusinessRuleViolationError(
                "checklist_must_be_complete",
                "Reopen a done task before adding checklist items",
            )
        item = ChecklistItem(text)
        self.checklist = _validated_checklist(self.checklist + (item,))
        self._touch(now)
        return item

    def complete_checklist_item(self, position: int, now: Optional[datetime] = None) -> ChecklistItem:
        self._ensure_editable()
        if isinstance(position, bool) or not isinstance(position, int):
            raise DomainValidationError("position", "Position must be an integer")
        if not 0 <= position < len(self.checklist):
            raise AggregateConsistencyError(
                f"Checklist has no item at position {position}"
            )
        item = self.checklist[position].mark_done()
        items = list(self.checklist)
        items[position] = item
        self.checklist = tuple(items)
        self._touch(now)
        return item

    # ==================== INTERNALS ====================

    def _ensure_editable(self) -> None:
        if self.status is TaskStatus.ARCHIVED:
            raise BusinessRuleViolationError(
                "archived_task_is_read_only", "Archived tasks cannot be modified"
            )

    def _touch(self, now: Optional[datetime]) -> None:
        self.updated_at = now or _utcnow()
