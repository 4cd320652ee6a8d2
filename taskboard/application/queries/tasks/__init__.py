"""Task queries."""

from taskboard.application.queries.tasks.get_task import GetTaskHandler, GetTaskQuery
from taskboard.application.queries.tasks.list_tasks import (
    ListTasksHandler,
    ListTasksQuery,
)

__all__ = [
    "GetTaskQuery",
    "GetTaskHandler",
    "ListTasksQuery",
    "ListTasksHandler",
]
