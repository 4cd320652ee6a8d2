"""
DOMAIN LAYER - Entities, value objects and ports

This layer contains:
- Entities: Business objects with identity (Task)
- Value Objects: Immutable, self-validating types (TaskId, OwnerEmail, ...)
- Ports: Interfaces that infrastructure implements (TaskRepository, IdGenerator, Clock)

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, Dishka)
2. NO I/O operations
3. Depends only on the stdlib and taskboard.errors
4. Business rules are enforced here and nowhere else
"""
