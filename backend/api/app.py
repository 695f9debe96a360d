"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.users.service import seed_admin
from modules.orders.routes import router as orders_router
from modules.franchises.routes import router as franchises_router

from .dependencies import ServiceContainer, get_container, set_container
from .errors import register_exception_handlers
from .routes import root

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates the schema and seeds the admin on startup, and releases the
    database engine on shutdown.
    """
    # Startup
    container = get_container()
    settings = container.settings
    logger.info("Starting %s %s on %s:%s", settings.app_name, settings.app_version, settings.host, settings.port)
    await container.database.create_schema()
    await seed_admin(container.user_repository, settings)
    yield
    # Shutdown
    await container.database.dispose()
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (global settings by default)
        container: Service container to install (tests pass their own)

    Returns:
        Configured FastAPI instance
    """
    if container is not None:
        set_container(container)
        settings = settings or container.settings
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Pizza ordering, franchise and store management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/swagger" if settings.debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app, debug=settings.debug)

    # Register routes
    app.include_router(root.router, tags=["root"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users_router, prefix="/api/user", tags=["users"])
    app.include_router(orders_router, prefix="/api/order", tags=["orders"])
    app.include_router(franchises_router, prefix="/api/franchise", tags=["franchises"])

    return app


# Application instance for uvicorn
app = create_app()
