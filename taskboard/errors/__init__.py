"""
ERROR TAXONOMY - closed, four-branch hierarchy

domain          -> DomainValidationError, BusinessRuleViolationError,
                   AggregateConsistencyError, WorkflowError
usecase         -> UseCaseValidationError, ResourceNotFoundError,
                   ConflictError, AuthorizationError
interface       -> InterfaceValidationError, AuthenticationError
infrastructure  -> PersistenceError

Lower layers raise; only the presentation layer turns errors into HTTP
responses (taskboard.presentation.errors).
"""

from taskboard.errors.kinds import ErrorKind, Layer
from taskboard.errors.base import (
    GENERIC_ERROR_MESSAGE,
    TaskboardError,
    DomainError,
    UseCaseError,
    InterfaceError,
    InfrastructureError,
    error_class_for,
)
from taskboard.errors.domain import (
    DomainValidationError,
    BusinessRuleViolationError,
    AggregateConsistencyError,
    WorkflowError,
)
from taskboard.errors.usecase import (
    UseCaseValidationError,
    ResourceNotFoundError,
    ConflictError,
    AuthorizationError,
)
from taskboard.errors.interface import InterfaceValidationError, AuthenticationError
from taskboard.errors.infrastructure import PersistenceError

__all__ = [
    "ErrorKind",
    "Layer",
    "GENERIC_ERROR_MESSAGE",
    "TaskboardError",
    "DomainError",
    "UseCaseError",
    "InterfaceError",
    "InfrastructureError",
    "error_class_for",
    "DomainValidationError",
    "BusinessRuleViolationError",
    "AggregateConsistencyError",
    "WorkflowError",
    "UseCaseValidationError",
    "ResourceNotFoundError",
    "ConflictError",
    "AuthorizationError",
    "InterfaceValidationError",
    "AuthenticationError",
    "PersistenceError",
]
