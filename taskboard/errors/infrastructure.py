"""
Infrastructure errors - raised by repository implementations and by the
request scope resolver.
Maps to: HTTP 500 Internal Server Error
"""

from typing import Optional

from taskboard.errors.base import GENERIC_ERROR_MESSAGE, InfrastructureError
from taskboard.errors.kinds import ErrorKind


class PersistenceError(InfrastructureError):
    """
    A persistence operation failed (driver error, lost connection, timeout).

    ``operation`` and ``cause`` are diagnostics for the server log. The
    message is always the generic one.
    """

    kind = ErrorKind.PERSISTENCE

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(GENERIC_ERROR_MESSAGE)
        self.operation = operation
        self.cause = cause

    def diagnostics(self):
        return {
            **super().diagnostics(),
            "operation": self.operation,
            "cause": repr(self.cause) if self.cause is not None else None,
        }
