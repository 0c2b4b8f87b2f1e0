"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application.
It handles:
1. Application initialization (store, AI gateway, services)
2. Router registration
3. Middleware configuration (audit & security headers)
4. Exception handlers (error taxonomy -> JSON error bodies)
5. Startup/shutdown logging

Run with: uvicorn astramind.api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from astramind import __version__
from astramind.api.routes import (
    activities_router,
    chat_router,
    conversations_router,
    goals_router,
    health_router,
    notes_router,
)
from astramind.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from astramind.core.config import Settings, get_settings
from astramind.core.exceptions import AstraMindException, InternalError
from astramind.core.logging_config import get_logger, setup_logging
from astramind.llm.gateway import AIGateway
from astramind.llm.client import LLMClient
from astramind.models.chat import ErrorResponse
from astramind.services.container import build_services
from astramind.storage.base import Storage
from astramind.storage.memory import MemoryStorage

logger = get_logger(__name__)


def _error_body(message: str, code: str, details: Optional[str] = None) -> dict:
    return ErrorResponse(error=message, code=code, details=details).model_dump(mode="json")


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map exceptions to ``{"error": ...}`` JSON responses."""

    @app.exception_handler(AstraMindException)
    async def astramind_exception_handler(request: Request, exc: AstraMindException):
        """Handle all application exceptions (400/404/500)."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.details or exc.message}")
        body = _error_body(exc.message, exc.error_code, exc.details)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Schema violations are client errors: 400, not FastAPI's 422."""
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            for err in exc.errors()
        )
        body = _error_body("Invalid request data", "validation_error", f"fields={fields}" if fields else None)
        return JSONResponse(status_code=400, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        body = _error_body(str(exc.detail), "http_error")
        return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")
        error = InternalError(details=str(exc) if settings.is_development() else None)
        body = _error_body(error.message, error.error_code, error.details)
        return JSONResponse(status_code=500, content=body)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
    gateway: Optional[AIGateway] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        storage: Entity store (defaults to a fresh MemoryStorage)
        gateway: AI gateway (defaults to one built on an LLMClient from settings)

    Returns:
        Configured FastAPI application with services on ``app.state``.
    """
    settings = settings or get_settings()
    storage = storage if storage is not None else MemoryStorage()
    gateway = gateway or AIGateway(LLMClient(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
        logger.info(f"LLM provider: {settings.llm_provider}")
        logger.info(f"Audit Logging: {settings.enable_audit_logging}")
        yield
        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title="AstraMind API",
        description="""
        Chat-driven personal productivity assistant.

        ## Features

        - **Chat**: conversations with an AI assistant, with history as context
        - **Goals**: track goals with progress and completion
        - **Notes**: tagged notes
        - **Activity log**: every change recorded for the timeline
        - **Daily summary**: today's counts with generated insights
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.services = build_services(storage, gateway, settings)

    # ============================================================
    # Middleware Configuration (Order matters!)
    # ============================================================

    app.add_middleware(SecurityHeadersMiddleware)

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)
        logger.info("Audit logging middleware enabled")

    if settings.is_development():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.warning("CORS configured for development (all origins allowed)")

    register_exception_handlers(app, settings)

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(conversations_router)
    app.include_router(chat_router)
    app.include_router(goals_router)
    app.include_router(notes_router)
    app.include_router(activities_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Service banner."""
        return {
            "message": "AstraMind API",
            "version": __version__,
            "documentation": "/docs",
            "health": "/health",
        }

    return app


# Initialize logging before building the module-level app
_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_dir)

app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "astramind.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=_settings.is_development(),
    )
