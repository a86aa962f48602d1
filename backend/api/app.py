"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings as get_shared_settings
from shared.logging import setup_logging

from .config import get_settings
from .error_handlers import register_error_handlers
from .models import ErrorResponse
from .routes import health, users
from modules.access.routes import router as access_router
from modules.admission.routes import router as admission_router
from modules.billing.routes import router as billing_router
from modules.community.routes import router as community_router

logger = logging.getLogger(__name__)

# Documented error bodies for every gated router
GATED_RESPONSES = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    shared = get_shared_settings()
    setup_logging(shared.log_level, shared.log_format)
    settings = get_settings()
    logger.info(f"Starting {shared.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {shared.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    shared = get_shared_settings()

    app = FastAPI(
        title=shared.app_name,
        description="Membership-gated community portal API",
        version=shared.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(access_router, prefix="/api/access", tags=["access"])
    app.include_router(users.router, prefix="/api/users", tags=["users"], responses=GATED_RESPONSES)
    app.include_router(
        admission_router, prefix="/api/admin/members", tags=["admin"], responses=GATED_RESPONSES,
    )
    app.include_router(billing_router, prefix="/api/billing", tags=["billing"], responses=GATED_RESPONSES)
    app.include_router(
        community_router, prefix="/api/community", tags=["community"], responses=GATED_RESPONSES,
    )

    return app


# Application instance for uvicorn
app = create_app()
