from taskboard.setup.ioc.container import (
    AppProvider,
    InMemoryPersistenceProvider,
    create_container,
)
from taskboard.setup.ioc.scope import RequestScope, resolve_request_scope

__all__ = [
    "AppProvider",
    "InMemoryPersistenceProvider",
    "create_container",
    "RequestScope",
    "resolve_request_scope",
]
