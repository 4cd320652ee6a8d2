"""
Domain errors - raised by entities and value objects.
Maps to: HTTP 422 Unprocessable Entity
"""

from typing import Optional

from taskboard.errors.base import DomainError
from taskboard.errors.kinds import ErrorKind


class DomainValidationError(DomainError):
    """A single field failed validation while building an entity or value."""

    kind = ErrorKind.DOMAIN_VALIDATION

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def diagnostics(self):
        return {**super().diagnostics(), "field": self.field}


class BusinessRuleViolationError(DomainError):
    kind = ErrorKind.BUSINESS_RULE_VIOLATION

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule

    def diagnostics(self):
        return {**super().diagnostics(), "rule": self.rule}


class AggregateConsistencyError(DomainError):
    """The aggregate's internal parts would stop agreeing with each other."""

    kind = ErrorKind.AGGREGATE_CONSISTENCY


class WorkflowError(DomainError):
    """Requested state transition is not allowed from the current state."""

    kind = ErrorKind.WORKFLOW

    def __init__(
        self,
        message: str,
        current: Optional[str] = None,
        requested: Optional[str] = None,
    ):
        super().__init__(message)
        self.current = current
        self.requested = requested
