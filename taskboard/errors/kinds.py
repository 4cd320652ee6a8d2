"""
Error kinds - the closed failure taxonomy.

Each member of ErrorKind carries:
- code   -> stable machine-readable identifier
- layer  -> owning architectural layer
- status -> default HTTP status

The status column is the only place status codes are chosen, apart from
transport-level request validation (see taskboard.presentation.errors).
"""

from enum import Enum


class Layer(str, Enum):
    DOMAIN = "domain"
    USECASE = "usecase"
    INTERFACE = "interface"
    INFRASTRUCTURE = "infrastructure"


class ErrorKind(Enum):
    # domain
    DOMAIN_VALIDATION = ("domain_validation", Layer.DOMAIN, 422)
    BUSINESS_RULE_VIOLATION = ("business_rule_violation", Layer.DOMAIN, 422)
    AGGREGATE_CONSISTENCY = ("aggregate_consistency", Layer.DOMAIN, 422)
    WORKFLOW = ("workflow", Layer.DOMAIN, 422)

    # usecase
    USECASE_VALIDATION = ("usecase_validation", Layer.USECASE, 400)
    RESOURCE_NOT_FOUND = ("resource_not_found", Layer.USECASE, 404)
    CONFLICT = ("conflict", Layer.USECASE, 409)
    # 404 rather than 403: unauthorized callers must not learn the resource exists
    AUTHORIZATION = ("authorization", Layer.USECASE, 404)

    # interface
    INTERFACE_VALIDATION = ("interface_validation", Layer.INTERFACE, 400)
    AUTHENTICATION = ("authentication", Layer.INTERFACE, 401)

    # infrastructure
    PERSISTENCE = ("persistence", Layer.INFRASTRUCTURE, 500)

    def __init__(self, code: str, layer: Layer, status: int):
        self.code = code
        self.layer = layer
        self.status = status
