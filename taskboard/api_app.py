"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware,
error translation and DI.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI

from taskboard import __version__
from taskboard.config.logging_config import setup_logging
from taskboard.config.settings import Config
from taskboard.presentation.api import health_router, tasks_router
from taskboard.presentation.errors import install_error_handlers
from taskboard.presentation.middleware import CorrelationIdMiddleware
from taskboard.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

logger = logging.getLogger(__name__)


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; a new one is created from Config if omitted

    Returns:
        FastAPI application instance
    """
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container already created and wired
        - Shutdown: close DI container (disconnects Prisma, drops the store)
        """
        logger.info("Taskboard API started. DI container initialized.")
        yield
        await container.close()
        logger.info("Taskboard API shutdown. DI container closed.")

    app = FastAPI(
        title="Taskboard API",
        description="Layered task tracking backend",
        version=__version__,
        lifespan=lifespan,
    )

    # request_scope opens one request container per HTTP request from this one
    app.state.container = container

    app.add_middleware(CorrelationIdMiddleware)
    install_error_handlers(app)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app


# Create the app instance
app = create_fastapi_app()
