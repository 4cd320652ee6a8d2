"""Task commands."""

from .create_task import CreateTaskCommand, CreateTaskHandler
from .update_task import UpdateTaskCommand, UpdateTaskHandler
from .change_status import ChangeTaskStatusCommand, ChangeTaskStatusHandler
from .checklist import (
    AddChecklistItemCommand,
    AddChecklistItemHandler,
    CompleteChecklistItemCommand,
    CompleteChecklistItemHandler,
)
from .delete_task import DeleteTaskCommand, DeleteTaskHandler

__all__ = [
    "CreateTaskCommand",
    "CreateTaskHandler",
    "UpdateTaskCommand",
    "UpdateTaskHandler",
    "ChangeTaskStatusCommand",
    "ChangeTaskStatusHandler",
    "AddChecklistItemCommand",
    "AddChecklistItemHandler",
    "CompleteChecklistItemCommand",
    "CompleteChecklistItemHandler",
    "DeleteTaskCommand",
    "DeleteTaskHandler",
]
