"""
Request scope - the per-request bundle of wired collaborators.

    TaskRepository -> handlers -> TaskController

Dishka builds the bundle inside a REQUEST-scoped container, so every request
gets its own repository, handlers and controller. Only APP-scoped
capabilities (task store or Prisma client, id generator, clock) are shared,
and none of them hold request state.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from dishka import AsyncContainer
from fastapi import Request

from taskboard.domain.ports.repositories import TaskRepository
from taskboard.errors import PersistenceError, TaskboardError
from taskboard.presentation.controllers.task_controller import TaskController


@dataclass(frozen=True)
class RequestScope:
    repository: TaskRepository
    controller: TaskController


@asynccontextmanager
async def resolve_request_scope(
    container: AsyncContainer,
) -> AsyncIterator[RequestScope]:
    """
    Open a request container and resolve a complete RequestScope from it.

    Resolution finishes before the caller gets the scope. A failure while
    wiring surfaces as PersistenceError and nothing is handed out. The request
    container, and with it every request-scoped object, is closed on exit.

    Usage:
        async with resolve_request_scope(container) as scope:
            task_id = await scope.controller.create(actor, body)
    """
    async with container() as request_container:
        try:
            scope = await request_container.get(RequestScope)
        except TaskboardError:
            raise
        except Exception as exc:
            raise PersistenceError("resolve_request_scope", cause=exc) from exc
        yield scope


async def request_scope(request: Request) -> AsyncIterator[RequestScope]:
    """FastAPI dependency: one RequestScope per HTTP request, closed after the response."""
    async with resolve_request_scope(request.app.state.container) as scope:
        yield scope
