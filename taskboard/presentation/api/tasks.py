"""
Tasks API Router.

- Receives a per-request RequestScope (repository + controller) built by Dishka
- Thin layer: authentication, request parsing, response models
- No try/except: every failure is translated by taskboard.presentation.errors

Flow:
  HTTP Request -> Router -> TaskController -> Handler -> TaskRepository
                                   |
  HTTP Response <- Router <- DTO <-
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response, status
from pydantic import BaseModel

from taskboard.application.dto.task import TaskDTO, TaskListDTO
from taskboard.presentation.dependencies.auth import AuthUser, get_current_user
from taskboard.presentation.schemas import (
    AddChecklistItemRequest,
    ChangeStatusRequest,
    CreateTaskRequest,
    CreateTaskResponse,
    DeleteTaskResponse,
    UpdateTaskRequest,
)
from taskboard.setup.ioc.scope import RequestScope, request_scope

logger = logging.getLogger(__name__)

# nginx convention for "client closed request"
CLIENT_CLOSED_REQUEST = 499

router = APIRouter(prefix="/tasks", tags=["tasks"])


async def _deliver(request: Request, result: BaseModel):
    """Hand the result over unless the caller has already gone away."""
    if await request.is_disconnected():
        logger.info(
            "Client disconnected before %s %s finished; dropping result",
            request.method,
            request.url.path,
        )
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    return result


@router.post(
    "",
    response_model=CreateTaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    request: Request,
    body: CreateTaskRequest,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    """Create a task. Returns the generated id."""
    result = await scope.controller.create(current_user.email, body)
    return await _deliver(request, result)


@router.get("", response_model=TaskListDTO)
async def list_tasks(
    request: Request,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    priority: Optional[str] = None,
    limit: Optional[int] = None,
):
    result = await scope.controller.list_tasks(
        current_user.email, status=status_filter, priority=priority, limit=limit
    )
    return await _deliver(request, result)


@router.get("/{task_id}", response_model=TaskDTO)
async def get_task(
    request: Request,
    task_id: str,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    result = await scope.controller.get(current_user.email, task_id)
    return await _deliver(request, result)


@router.patch("/{task_id}", response_model=TaskDTO)
async def update_task(
    request: Request,
    task_id: str,
    body: UpdateTaskRequest,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
    if_match: Optional[str] = Header(default=None),
):
    """
    Edit title, description and/or priority.

    The expected version comes from the If-Match header or the body's
    expected_version; a stale version answers 409.
    """
    result = await scope.controller.update(current_user.email, task_id, body, if_match)
    return await _deliver(request, result)


@router.post("/{task_id}/status", response_model=TaskDTO)
async def change_task_status(
    request: Request,
    task_id: str,
    body: ChangeStatusRequest,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    result = await scope.controller.change_status(current_user.email, task_id, body)
    return await _deliver(request, result)


@router.post("/{task_id}/checklist", response_model=TaskDTO)
async def add_checklist_item(
    request: Request,
    task_id: str,
    body: AddChecklistItemRequest,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    result = await scope.controller.add_checklist_item(current_user.email, task_id, body)
    return await _deliver(request, result)


@router.post("/{task_id}/checklist/{position}/complete", response_model=TaskDTO)
async def complete_checklist_item(
    request: Request,
    task_id: str,
    position: int,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    result = await scope.controller.complete_checklist_item(
        current_user.email, task_id, position
    )
    return await _deliver(request, result)


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(
    request: Request,
    task_id: str,
    current_user: AuthUser = Depends(get_current_user),
    scope: RequestScope = Depends(request_scope),
):
    result = await scope.controller.delete(current_user.email, task_id)
    return await _deliver(request, result)
