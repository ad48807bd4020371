"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConsoleError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)
from modules.console.exceptions import DialogStateError
from .dependencies import get_container
from .models.errors import ErrorResponse
from .routes import accounts, dashboard, health, posts, session

logger = logging.getLogger(__name__)


def status_for(error: ConsoleError) -> int:
    """HTTP status code for a console error."""
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, DialogStateError):
        return 409
    if isinstance(error, ValidationError):
        return 422
    if isinstance(error, ExternalServiceError):
        return 502
    return 400


async def console_error_handler(request: Request, exc: ConsoleError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Session"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting admin console API on {settings.host}:{settings.port}")
    yield
    # Shutdown
    await get_container().close()
    logger.info("Shutting down admin console API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Admin console for accounts and blog posts",
        version=settings.app_version,
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

    app.add_exception_handler(ConsoleError, console_error_handler)

    # Register routes
    session_errors = {401: {"model": ErrorResponse}}
    console_errors = {
        **session_errors,
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    }
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(session.router, prefix="/api/session", tags=["session"], responses=session_errors)
    app.include_router(accounts.router, prefix="/api/accounts", tags=["accounts"], responses=console_errors)
    app.include_router(posts.router, prefix="/api/posts", tags=["posts"], responses=console_errors)
    app.include_router(dashboard.router, prefix="/api", tags=["dashboard"], responses=console_errors)

    return app


# Application instance for uvicorn
app = create_app()
