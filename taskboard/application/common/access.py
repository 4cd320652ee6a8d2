"""Loading and writing back a task on behalf of an actor."""

from taskboard.domain.entities.task import Task
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.domain.value_objects.owner_email import OwnerEmail
from taskboard.domain.value_objects.task_id import TaskId
from taskboard.errors import AuthorizationError, ConflictError, ResourceNotFoundError

ENTITY_NAME = "Task"


async def load_owned_task(
    repository: TaskRepository, task_id: TaskId, actor: OwnerEmail
) -> Task:
    """
    Fetch a task the actor owns.

    Raises:
        ResourceNotFoundError: the task does not exist
        AuthorizationError: the task belongs to someone else
    """
    task = await repository.find_by_id(task_id)
    if task is None:
        raise ResourceNotFoundError(ENTITY_NAME, task_id.value)
    if not task.is_owned_by(actor):
        raise AuthorizationError(
            ENTITY_NAME,
            task_id.value,
            reason=f"{actor.value} does not own task {task_id.value}",
        )
    return task


async def save_changes(
    repository: TaskRepository, task: Task, expected_version: int
) -> None:
    """
    Write a modified task back.

    Raises:
        ConflictError: someone else changed or deleted the task since it was loaded
    """
    if not await repository.update(task, expected_version):
        raise ConflictError(
            f"{ENTITY_NAME} '{task.id.value}' was modified by another request"
        )
