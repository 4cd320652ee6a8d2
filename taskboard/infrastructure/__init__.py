"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: TaskRepository implementations (in-memory, Prisma)
- ids.py: UUIDv7 IdGenerator
- clock.py: system Clock
"""

from taskboard.infrastructure.clock import SystemClock
from taskboard.infrastructure.ids import UuidV7Generator

__all__ = [
    "SystemClock",
    "UuidV7Generator",
]
