"""
Prisma persistence provider.

- Prisma client: Scope.APP, connected on first use, disconnected when the
  container closes. The engine behind it pools connections; each request
  borrows the client through its own repository.
- A failed connect is reported as PersistenceError before any handler runs.
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from taskboard.config.settings import Config
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.errors import PersistenceError
from taskboard.infrastructure.persistence.prisma_task_repository import (
    PrismaTaskRepository,
)

logger = logging.getLogger(__name__)


class PrismaPersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        prisma = Prisma(datasource={"url": Config.DATABASE_URL}) if Config.DATABASE_URL else Prisma()
        try:
            await prisma.connect()
        except Exception as exc:
            raise PersistenceError("prisma.connect", cause=exc) from exc
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, prisma: Prisma) -> TaskRepository:
        return PrismaTaskRepository(prisma, timeout=Config.REPOSITORY_TIMEOUT_SECONDS)
