"""
Mapping between Task entities and storage rows.

Row shape (shared by the in-memory store and the Prisma model):
    id, owner, title, description, priority, status, checklist (list of
    {"text", "done"}), version, created_at, updated_at
"""

from typing import Any

from taskboard.domain.entities.task import Task
from taskboard.domain.value_objects.checklist_item import ChecklistItem
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.priority import Priority
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.domain.value_objects.task_status import TaskStatus
from taskboard.domain.value_objects.task_title import TaskTitle


def task_to_row(task: Task) -> dict[str, Any]:
    return {
        "id": task.id.value,
        "owner": task.owner.value,
        "title": task.title.value,
        "description": task.description,
        "priority": task.priority.value,
        "status": task.status.value,
        "checklist": [{"text": item.text, "done": item.done} for item in task.checklist],
        "version": task.version,
        "created_at": task.created_at,
        "updated_at": task.updated_at,
    }


def row_to_task(row: dict[str, Any]) -> Task:
    return Task(
        id=TaskId(row["id"]),
        owner=OwnerEmail(row["owner"]),
        title=TaskTitle(row["title"]),
        description=row["description"],
        priority=Priority(row["priority"]),
        status=TaskStatus(row["status"]),
        checklist=tuple(
            ChecklistItem(text=item["text"], done=item["done"])
            for item in row["checklist"]
        ),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
