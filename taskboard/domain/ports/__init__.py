"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the application needs without saying HOW:
- repositories/task_repository.py -> task persistence
- id_generator.py                 -> identifiers for new entities
- clock.py                        -> current time
"""

from taskboard.domain.ports.clock import Clock
from taskboard.domain.ports.id_generator import IdGenerator
from taskboard.domain.ports.repositories import TaskRepository

__all__ = ["Clock", "IdGenerator", "TaskRepository"]
