"""
DTOs - Data Transfer Objects

- task.py -> TaskDTO, ChecklistItemDTO, TaskListDTO

DTOs are what handlers hand back to the presentation layer. Entities never
leave the application layer.
"""

from taskboard.application.dto.task import ChecklistItemDTO, TaskDTO, TaskListDTO

__all__ = [
    "ChecklistItemDTO",
    "TaskDTO",
    "TaskListDTO",
]
