"""Task DTOs for API responses."""

from datetime import datetime

from pydantic import BaseModel

from taskboard.domain.entities.task import Task


class ChecklistItemDTO(BaseModel):
    text: str
    done: bool


class TaskDTO(BaseModel):
    id: str
    owner: str
    title: str
    description: str
    priority: str
    status: str
    checklist: list[ChecklistItemDTO]
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(
            id=task.id.value,
            owner=task.owner.value,
            title=task.title.value,
            description=task.description,
            priority=task.priority.value,
            status=task.status.value,
            checklist=[
                ChecklistItemDTO(text=item.text, done=item.done)
                for item in task.checklist
            ],
            version=task.version,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskListDTO(BaseModel):
    tasks: list[TaskDTO]
    total: int
