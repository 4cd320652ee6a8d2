"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier generated by the application layer
- Changes state only through methods that re-validate its invariants
- Is a plain dataclass (no ORM, no Pydantic)
"""

from taskboard.domain.entities.task import Task

__all__ = ["Task"]
