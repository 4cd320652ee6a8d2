"""
Persistence Layer - TaskRepository implementations.

The Prisma implementation is imported from its own module by the Prisma
provider only, so the in-memory backend works without a generated client.
"""

from taskboard.infrastructure.persistence.memory_task_repository import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
)

__all__ = [
    "InMemoryTaskRepository",
    "InMemoryTaskStore",
]
