"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, handlers, controller)
- Maps abstract ports to concrete implementations
- Manages lifecycle:
    Scope.APP     = created once per process, closed on shutdown
    Scope.REQUEST = created per HTTP request, discarded with it

Flow:
  Container -> provides -> InMemoryTaskRepository -> to -> CreateTaskHandler
                                    |
                            as the TaskRepository port
"""

import logging
from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from taskboard.application.commands.tasks import (
    AddChecklistItemHandler,
    ChangeTaskStatusHandler,
    CompleteChecklistItemHandler,
    CreateTaskHandler,
    DeleteTaskHandler,
    UpdateTaskHandler,
)
from taskboard.application.queries.tasks import GetTaskHandler, ListTasksHandler
from taskboard.config.settings import Config
from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.id_generator import IdGenerator
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.infrastructure.clock import SystemClock
from taskboard.infrastructure.ids import UuidV7Generator
from taskboard.infrastructure.persistence import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
)
from taskboard.presentation.controllers.task_controller import TaskController
from taskboard.setup.ioc.scope import RequestScope

logger = logging.getLogger(__name__)


class InMemoryPersistenceProvider(Provider):
    """TaskRepository backed by a process-wide in-memory store."""

    def __init__(self, store: Optional[InMemoryTaskStore] = None):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_task_store(self) -> InMemoryTaskStore:
        return self._store if self._store is not None else InMemoryTaskStore()

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, store: InMemoryTaskStore) -> TaskRepository:
        """
        - Return type is ABSTRACT (TaskRepository)
        - Implementation is CONCRETE (InMemoryTaskRepository)
        - Scope.REQUEST = new instance per HTTP request
        """
        return InMemoryTaskRepository(store, timeout=Config.REPOSITORY_TIMEOUT_SECONDS)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers ports that are not persistence, every handler, the controller and
    the RequestScope bundle. Persistence comes from a separate provider.
    """

    # ==================== CAPABILITIES ====================

    @provide(scope=Scope.APP)
    def get_id_generator(self) -> IdGenerator:
        return UuidV7Generator()

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        return SystemClock()

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_task_handler(
        self, repository: TaskRepository, id_generator: IdGenerator, clock: Clock
    ) -> CreateTaskHandler:
        return CreateTaskHandler(repository, id_generator, clock)

    @provide(scope=Scope.REQUEST)
    def get_update_task_handler(
        self, repository: TaskRepository, clock: Clock
    ) -> UpdateTaskHandler:
        return UpdateTaskHandler(repository, clock)

    @provide(scope=Scope.REQUEST)
    def get_change_status_handler(
        self, repository: TaskRepository, clock: Clock
    ) -> ChangeTaskStatusHandler:
        return ChangeTaskStatusHandler(repository, clock)

    @provide(scope=Scope.REQUEST)
    def get_add_checklist_item_handler(
        self, repository: TaskRepository, clock: Clock
    ) -> AddChecklistItemHandler:
        return AddChecklistItemHandler(repository, clock)

    @provide(scope=Scope.REQUEST)
    def get_complete_checklist_item_handler(
        self, repository: TaskRepository, clock: Clock
    ) -> CompleteChecklistItemHandler:
        return CompleteChecklistItemHandler(repository, clock)

    @provide(scope=Scope.REQUEST)
    def get_delete_task_handler(self, repository: TaskRepository) -> DeleteTaskHandler:
        return DeleteTaskHandler(repository)

    @provide(scope=Scope.REQUEST)
    def get_get_task_handler(self, repository: TaskRepository) -> GetTaskHandler:
        return GetTaskHandler(repository)

    @provide(scope=Scope.REQUEST)
    def get_list_tasks_handler(self, repository: TaskRepository) -> ListTasksHandler:
        return ListTasksHandler(repository)

    # ==================== BOUNDARY ====================

    @provide(scope=Scope.REQUEST)
    def get_task_controller(
        self,
        create_task: CreateTaskHandler,
        update_task: UpdateTaskHandler,
        change_status: ChangeTaskStatusHandler,
        add_checklist_item: AddChecklistItemHandler,
        complete_checklist_item: CompleteChecklistItemHandler,
        delete_task: DeleteTaskHandler,
        get_task: GetTaskHandler,
        list_tasks: ListTasksHandler,
    ) -> TaskController:
        return TaskController(
            create_task=create_task,
            update_task=update_task,
            change_status=change_status,
            add_checklist_item=add_checklist_item,
            complete_checklist_item=complete_checklist_item,
            delete_task=delete_task,
            get_task=get_task,
            list_tasks=list_tasks,
        )

    @provide(scope=Scope.REQUEST)
    def get_request_scope(
        self, repository: TaskRepository, controller: TaskController
    ) -> RequestScope:
        return RequestScope(repository=repository, controller=controller)


def persistence_provider(storage: Optional[str] = None) -> Provider:
    """Pick the persistence provider for the configured storage backend."""
    storage = storage or Config.TASKBOARD_STORAGE
    if storage == "prisma":
        # Needs a generated Prisma client, so only imported when selected
        from taskboard.setup.ioc.prisma_provider import PrismaPersistenceProvider

        return PrismaPersistenceProvider()
    if storage != "memory":
        raise ValueError(f"Unknown TASKBOARD_STORAGE: {storage}")
    return InMemoryPersistenceProvider()


def create_container(persistence: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE per application
    - ``persistence`` overrides the configured storage backend
    """
    if persistence is None:
        persistence = persistence_provider()
    logger.info("Creating DI container with %s", type(persistence).__name__)
    return make_async_container(AppProvider(), persistence)
