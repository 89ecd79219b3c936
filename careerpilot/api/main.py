"""Main FastAPI application module for CareerPilot.

This module creates and configures the FastAPI application instance with all
necessary middleware, routers, and event handlers.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from careerpilot.api.middleware.logging_middleware import LoggingMiddleware
from careerpilot.api.middleware.request_id import RequestIDMiddleware, get_request_id
from careerpilot.core.config import get_settings
from careerpilot.core.events import create_start_app_handler, create_stop_app_handler
from careerpilot.schemas.base import ErrorResponse
from careerpilot.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CareerPilotError,
    DatabaseError,
    ResourceNotFoundError,
    ValidationError,
)
from careerpilot.utils.logger import get_api_logger

settings = get_settings()
logger = get_api_logger()

# Most specific class first; subclasses of CareerPilotError fall back to 500
ERROR_STATUS_CODES = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (DatabaseError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_code_for(exc: CareerPilotError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int,
    message: str,
    code: str,
    details: Dict[str, Any] = None,
    headers: Dict[str, str] = None,
) -> JSONResponse:
    body = ErrorResponse.create(
        message=message,
        code=code,
        details=jsonable_encoder(details or {}),
        request_id=get_request_id(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events.

    Args:
        app: FastAPI application instance
    """
    logger.info(
        "Starting CareerPilot API",
        extra={
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
        }
    )
    await create_start_app_handler(app)()

    yield

    logger.info("Shutting down CareerPilot API")
    await create_stop_app_handler(app)()


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Career recommendations, fit scoring and mentorship analytics",
        version=settings.APP_VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs" if settings.ENABLE_API_DOCS else None,
        redoc_url=f"{settings.API_V1_PREFIX}/redoc" if settings.ENABLE_API_DOCS else None,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json" if settings.ENABLE_API_DOCS else None,
        lifespan=lifespan,
        swagger_ui_parameters={"persistAuthorization": True},
    )

    app = register_exception_handlers(app)
    app = register_middleware(app)
    app = register_routers(app)
    app = register_health_checks(app)

    if settings.ENABLE_METRICS:
        setup_metrics(app)

    return app


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Register custom exception handlers.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with exception handlers registered
    """

    @app.exception_handler(CareerPilotError)
    async def application_exception_handler(
        request: Request, exc: CareerPilotError
    ) -> JSONResponse:
        """Translate application errors into the error envelope."""
        status_code = status_code_for(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "status_code": status_code,
                "error_code": exc.error_code,
                "path": request.url.path,
            }
        )

        headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
        return error_response(
            status_code,
            exc.message,
            exc.error_code or type(exc).__name__.upper(),
            details=exc.details,
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(
            f"HTTP exception: {exc.detail}",
            extra={"status_code": exc.status_code, "path": request.url.path}
        )
        return error_response(exc.status_code, str(exc.detail), f"HTTP_{exc.status_code}")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body and parameter validation errors."""
        logger.warning(
            "Validation error",
            extra={"errors": jsonable_encoder(exc.errors()), "path": request.url.path}
        )
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Validation error",
            "REQUEST_VALIDATION_ERROR",
            details={"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle uncaught exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={"exception_type": type(exc).__name__, "path": request.url.path},
            exc_info=True,
        )

        # Don't expose internal errors in production
        message = "An internal error occurred" if settings.APP_ENV == "production" else str(exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message, "INTERNAL_ERROR")

    return app


def register_middleware(app: FastAPI) -> FastAPI:
    """Register application middleware.

    Middleware added last runs first, so the request id is assigned before
    the access log line is written.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with middleware registered
    """
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1024)

    if settings.APP_ENV == "production":
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

    return app


def register_routers(app: FastAPI) -> FastAPI:
    """Register API routers under the versioned prefix.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with routers registered
    """
    from careerpilot.routers import (
        analytics,
        assessments,
        careers,
        feedback,
        goals,
        health,
        insights,
        mentorship,
        profile,
    )

    api_prefix = settings.API_V1_PREFIX

    app.include_router(health.router, prefix=f"{api_prefix}/health", tags=["Health"])
    app.include_router(assessments.router, prefix=f"{api_prefix}/assessments", tags=["Assessments"])
    app.include_router(careers.router, prefix=f"{api_prefix}/careers", tags=["Careers"])
    app.include_router(mentorship.router, prefix=f"{api_prefix}/mentorship", tags=["Mentorship"])
    app.include_router(analytics.router, prefix=f"{api_prefix}/analytics", tags=["Analytics"])
    app.include_router(profile.router, prefix=f"{api_prefix}/profile", tags=["Profile"])
    app.include_router(goals.router, prefix=f"{api_prefix}/goals", tags=["Goals"])
    app.include_router(feedback.router, prefix=f"{api_prefix}/feedback", tags=["Feedback"])
    app.include_router(insights.router, prefix=f"{api_prefix}/insights", tags=["Insights"])

    return app


def register_health_checks(app: FastAPI) -> FastAPI:
    """Register unversioned health and root endpoints.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with health checks registered
    """

    @app.get("/health", tags=["Health"], summary="Basic health check", response_model=Dict[str, Any])
    async def health_check() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
        }

    @app.get("/", tags=["Root"], summary="Root endpoint", response_model=Dict[str, str])
    async def root() -> Dict[str, str]:
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
            "health": "/health",
        }

    return app


def setup_metrics(app: FastAPI) -> None:
    """Expose Prometheus metrics on ``/metrics``.

    Args:
        app: FastAPI application instance
    """
    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[".*health.*", "/metrics"],
        inprogress_name="careerpilot_inprogress",
        inprogress_labels=True,
    )
    instrumentator.instrument(app).expose(app, include_in_schema=False)
    logger.info("Prometheus metrics enabled")


app = create_application()


__all__ = ["app", "create_application"]
