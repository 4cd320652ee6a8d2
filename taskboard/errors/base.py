"""
Base of the error taxonomy.

TaskboardError
├── DomainError          (layer = domain)
├── UseCaseError         (layer = usecase)
├── InterfaceError       (layer = interface)
└── InfrastructureError  (layer = infrastructure)

Concrete leaves bind exactly one ErrorKind. A leaf may only bind a kind of
its own branch's layer, and a kind may only be bound once. Both rules are
checked when the class is defined.
"""

from typing import Any, ClassVar, Optional

from taskboard.errors.kinds import ErrorKind, Layer

GENERIC_ERROR_MESSAGE = "Internal server error"

_CLASS_BY_KIND: dict[ErrorKind, type["TaskboardError"]] = {}


class TaskboardError(Exception):
    """Root of every deliberate, typed failure signal."""

    layer: ClassVar[Optional[Layer]] = None
    kind: ClassVar[Optional[ErrorKind]] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if kind is None:
            return
        if cls.layer is None or kind.layer is not cls.layer:
            raise TypeError(
                f"{cls.__name__} binds {kind.name} ({kind.layer.value}) "
                f"outside its branch ({cls.layer.value if cls.layer else 'none'})"
            )
        if kind in _CLASS_BY_KIND:
            raise TypeError(
                f"{kind.name} is already bound to {_CLASS_BY_KIND[kind].__name__}"
            )
        _CLASS_BY_KIND[kind] = cls

    @property
    def code(self) -> Optional[str]:
        return self.kind.code if self.kind else None

    def diagnostics(self) -> dict[str, Any]:
        """Server-side context for logs. Never serialized to callers."""
        return {"code": self.code, "message": self.message}


class DomainError(TaskboardError):
    layer = Layer.DOMAIN


class UseCaseError(TaskboardError):
    layer = Layer.USECASE


class InterfaceError(TaskboardError):
    layer = Layer.INTERFACE


class InfrastructureError(TaskboardError):
    layer = Layer.INFRASTRUCTURE


def error_class_for(kind: ErrorKind) -> type[TaskboardError]:
    """Return the single exception class bound to ``kind``."""
    return _CLASS_BY_KIND[kind]
