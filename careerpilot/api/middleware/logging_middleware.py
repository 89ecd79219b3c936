"""Access logging middleware for the CareerPilot API."""

import time
from typing import Callable, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from careerpilot.utils.logger import get_api_logger, log_api_response

logger = get_api_logger()

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and its response status and duration."""

    def __init__(self, app: ASGIApp, exclude_paths: Optional[List[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/health", "/metrics", "/docs", "/openapi.json"]

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        start_time = time.time()
        logger.info(
            f"Request: {request.method} {request.url.path}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_host": request.client.host if request.client else None,
                "headers": self._mask_headers(dict(request.headers)),
            }
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{duration_ms / 1000:.3f}"
        log_api_response(
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            logger=logger,
        )
        return response

    @staticmethod
    def _mask_headers(headers: dict) -> dict:
        return {
            key: "***MASKED***" if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }


__all__ = ["LoggingMiddleware"]
