"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Only raises infrastructure errors (PersistenceError)
- Returns None / False / [] for absence, never raises for it

Infrastructure layer provides implementations.
"""

from taskboard.domain.ports.repositories.task_repository import TaskRepository

__all__ = ["TaskRepository"]
