"""
Use case errors - raised by command/query handlers only.

Handlers are the single place where a repository "absence" becomes
ResourceNotFoundError, where a version mismatch becomes ConflictError, and
where ownership checks raise AuthorizationError.
"""

from taskboard.errors.base import UseCaseError
from taskboard.errors.kinds import ErrorKind


def _not_found_message(entity_name: str, identifier: str) -> str:
    return f"{entity_name} '{identifier}' not found"


class UseCaseValidationError(UseCaseError):
    """Input is well-formed but not acceptable for this operation."""

    kind = ErrorKind.USECASE_VALIDATION


class ResourceNotFoundError(UseCaseError):
    kind = ErrorKind.RESOURCE_NOT_FOUND

    def __init__(self, entity_name: str, identifier: str):
        super().__init__(_not_found_message(entity_name, identifier))
        self.entity_name = entity_name
        self.identifier = identifier


class ConflictError(UseCaseError):
    kind = ErrorKind.CONFLICT


class AuthorizationError(UseCaseError):
    """
    Actor may not touch the resource.

    The caller-visible message is the same as ResourceNotFoundError's so the
    response does not reveal that the resource exists. The real reason is kept
    for logs only.
    """

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, entity_name: str, identifier: str, reason: str = ""):
        super().__init__(_not_found_message(entity_name, identifier))
        self.entity_name = entity_name
        self.identifier = identifier
        self.reason = reason

    def diagnostics(self):
        return {**super().diagnostics(), "reason": self.reason}
