"""
Repository call guard.

Every TaskRepository implementation routes its driver calls through
``guarded`` so that:
- a call that exceeds the timeout fails as PersistenceError
- any driver exception surfaces as PersistenceError(operation, cause)
- writes run shielded: if the request is cancelled mid-write, the write still
  runs to completion (or fails) as one unit instead of being cut off
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from taskboard.errors import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded(
    operation: str,
    call: Callable[[], Awaitable[T]],
    timeout: float,
    write: bool = False,
) -> T:
    try:
        awaitable = call()
        if write:
            awaitable = asyncio.shield(awaitable)
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except PersistenceError:
        raise
    except Exception as exc:
        logger.error(
            "Persistence operation %s failed: %s: %s",
            operation,
            type(exc).__name__,
            exc,
        )
        raise PersistenceError(operation, cause=exc) from exc
