"""HTTP middleware for the CareerPilot API."""

from careerpilot.api.middleware.logging_middleware import LoggingMiddleware
from careerpilot.api.middleware.request_id import RequestIDMiddleware, get_request_id

__all__ = ["LoggingMiddleware", "RequestIDMiddleware", "get_request_id"]
