"""
Interface errors - raised by the HTTP layer while parsing inbound requests.
"""

from typing import Optional

from taskboard.errors.base import InterfaceError
from taskboard.errors.kinds import ErrorKind


class InterfaceValidationError(InterfaceError):
    kind = ErrorKind.INTERFACE_VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AuthenticationError(InterfaceError):
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
