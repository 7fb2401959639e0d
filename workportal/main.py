"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from workportal.application.dto.base_dto import HealthCheckResponseDTO
from workportal.config import settings
from workportal.domain.models.base import DomainException
from workportal.infrastructure.db.database import create_tables
from workportal.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware, domain_exception_handler
from workportal.infrastructure.web.middleware.request_context import RequestContextMiddleware
from workportal.infrastructure.web.routers import (
    auth,
    profiles,
    projects,
    deliverables,
    messages,
    invoices,
    notifications,
    dashboard,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}, storage: {settings.storage_backend}")

    if settings.sentry_dsn and not settings.is_development:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            environment=settings.environment,
            integrations=[
                FastApiIntegration(transaction_style="endpoint"),
                SqlalchemyIntegration(),
            ],
        )
        logger.info("Sentry initialized")

    if settings.uses_sqlalchemy and settings.is_development:
        create_tables()
        logger.info("Development tables ensured")

    yield

    logger.info("Shutting down application")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(DomainException, domain_exception_handler)

    routes = [
        (auth.router, "/auth", "Authentication"),
        (profiles.router, "/profiles", "Profiles"),
        (projects.router, "/projects", "Projects"),
        (deliverables.router, "/deliverables", "Deliverables"),
        (messages.router, "/messages", "Messages"),
        (invoices.router, "/invoices", "Invoices"),
        (notifications.router, "/notifications", "Notifications"),
        (dashboard.router, "/dashboard", "Dashboard"),
    ]
    for router, prefix, tag in routes:
        app.include_router(router, prefix=f"{settings.api_prefix}{prefix}", tags=[tag])

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check() -> HealthCheckResponseDTO:
        """Health check endpoint for monitoring."""
        return HealthCheckResponseDTO(
            status="healthy",
            version=settings.api_version,
            environment=settings.environment,
            storage_backend=settings.storage_backend,
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Unknown paths get a JSON body; route-level 404s keep their detail."""
        detail = getattr(exc, "detail", None)
        if detail and detail != "Not Found":
            return JSONResponse(status_code=404, content={"detail": detail}, headers=getattr(exc, "headers", None))
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "workportal.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
