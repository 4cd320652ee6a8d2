"""
TaskController - boundary adapter between HTTP routes and task handlers.

One controller is built per request (together with its handlers and their
repository) and thrown away afterwards. It turns parsed HTTP input into
commands/queries and handler results into response bodies. It never catches
errors: whatever a handler raises travels to the boundary translator.
"""

from typing import Optional

from taskboard.application.commands.tasks import (
    AddChecklistItemCommand,
    AddChecklistItemHandler,
    ChangeTaskStatusCommand,
    ChangeTaskStatusHandler,
    CompleteChecklistItemCommand,
    CompleteChecklistItemHandler,
    CreateTaskCommand,
    CreateTaskHandler,
    DeleteTaskCommand,
    DeleteTaskHandler,
    UpdateTaskCommand,
    UpdateTaskHandler,
)
from taskboard.application.dto.task import TaskDTO, TaskListDTO
from taskboard.application.queries.tasks import (
    GetTaskHandler,
    GetTaskQuery,
    ListTasksHandler,
    ListTasksQuery,
)
from taskboard.config.settings import Config
from taskboard.presentation.parsing import (
    parse_if_match,
    parse_task_id,
    resolve_expected_version,
)
from taskboard.presentation.schemas import (
    AddChecklistItemRequest,
    ChangeStatusRequest,
    CreateTaskRequest,
    CreateTaskResponse,
    DeleteTaskResponse,
    UpdateTaskRequest,
)


class TaskController:
    def __init__(
        self,
        create_task: CreateTaskHandler,
        update_task: UpdateTaskHandler,
        change_status: ChangeTaskStatusHandler,
        add_checklist_item: AddChecklistItemHandler,
        complete_checklist_item: CompleteChecklistItemHandler,
        delete_task: DeleteTaskHandler,
        get_task: GetTaskHandler,
        list_tasks: ListTasksHandler,
    ):
        self._create_task = create_task
        self._update_task = update_task
        self._change_status = change_status
        self._add_checklist_item = add_checklist_item
        self._complete_checklist_item = complete_checklist_item
        self._delete_task = delete_task
        self._get_task = get_task
        self._list_tasks = list_tasks

    async def create(self, actor: str, body: CreateTaskRequest) -> CreateTaskResponse:
        task_id = await self._create_task.execute(
            CreateTaskCommand(
                actor=actor,
                title=body.title,
                description=body.description,
                priority=body.priority,
            )
        )
        return CreateTaskResponse(id=task_id.value)

    async def get(self, actor: str, task_id: str) -> TaskDTO:
        return await self._get_task.execute(
            GetTaskQuery(task_id=parse_task_id(task_id), actor=actor)
        )

    async def list_tasks(
        self,
        actor: str,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> TaskListDTO:
        return await self._list_tasks.execute(
            ListTasksQuery(
                actor=actor,
                status=status,
                priority=priority,
                limit=limit if limit is not None else Config.TASK_LIST_DEFAULT_LIMIT,
            )
        )

    async def update(
        self,
        actor: str,
        task_id: str,
        body: UpdateTaskRequest,
        if_match: Optional[str] = None,
    ) -> TaskDTO:
        expected_version = resolve_expected_version(
            parse_if_match(if_match), body.expected_version
        )
        return await self._update_task.execute(
            UpdateTaskCommand(
                task_id=parse_task_id(task_id),
                actor=actor,
                expected_version=expected_version,
                title=body.title,
                description=body.description,
                priority=body.priority,
            )
        )

    async def change_status(
        self, actor: str, task_id: str, body: ChangeStatusRequest
    ) -> TaskDTO:
        return await self._change_status.execute(
            ChangeTaskStatusCommand(
                task_id=parse_task_id(task_id), actor=actor, status=body.status
            )
        )

    async def add_checklist_item(
        self, actor: str, task_id: str, body: AddChecklistItemRequest
    ) -> TaskDTO:
        return await self._add_checklist_item.execute(
            AddChecklistItemCommand(
                task_id=parse_task_id(task_id), actor=actor, text=body.text
            )
        )

    async def complete_checklist_item(
        self, actor: str, task_id: str, position: int
    ) -> TaskDTO:
        return await self._complete_checklist_item.execute(
            CompleteChecklistItemCommand(
                task_id=parse_task_id(task_id), actor=actor, position=position
            )
        )

    async def delete(self, actor: str, task_id: str) -> DeleteTaskResponse:
        success = await self._delete_task.execute(
            DeleteTaskCommand(task_id=parse_task_id(task_id), actor=actor)
        )
        return DeleteTaskResponse(success=success)
