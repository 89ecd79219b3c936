"""Logging configuration for CareerPilot.

Structured JSON logging in production, a readable console format in
development and a quiet console in tests.
"""

import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class CareerPilotFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with service context."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add standard fields to the JSON record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['application'] = 'careerpilot'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class ContextFilter(logging.Filter):
    """Filter to add fixed contextual fields to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


class RequestContextFilter(logging.Filter):
    """Attach the current request id, when one is set, to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Imported lazily: the middleware module imports this one.
        from careerpilot.api.middleware.request_id import request_id_var

        request_id = request_id_var.get()
        if request_id and not hasattr(record, "request_id"):
            record.request_id = request_id
        return True


class LoggerConfig:
    """Logger configuration manager."""

    COMPONENTS = {
        'api': 'careerpilot.api',
        'database': 'careerpilot.database',
        'cache': 'careerpilot.cache',
        'engine': 'careerpilot.engine',
        'security': 'careerpilot.security',
        'business': 'careerpilot.business',
    }

    def __init__(
        self,
        environment: str = 'development',
        log_level: str = 'INFO',
        format_type: str = 'text',
        log_file: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, test, staging, production)
            log_level: Default log level
            format_type: "json" or "text" for console output
            log_file: Optional rotating log file path
            max_bytes: Rotation size for the log file
            backup_count: Rotated files to keep
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper())
        self.format_type = format_type
        self.log_file = log_file
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._configure_root_logger()
        self._configure_component_loggers()

    def _configure_root_logger(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()

        if self.environment == 'test':
            self._add_test_handlers(root_logger)
        elif self.environment == 'production' or self.format_type == 'json':
            self._add_production_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        json_formatter = CareerPilotFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(json_formatter)
        console_handler.addFilter(RequestContextFilter())
        logger.addHandler(console_handler)

        if self.log_file:
            log_path = Path(self.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(json_formatter)
            file_handler.addFilter(RequestContextFilter())
            logger.addHandler(file_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-28s | %(funcName)-15s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(console_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        ))
        logger.addHandler(console_handler)

    def _configure_component_loggers(self) -> None:
        for component, logger_name in self.COMPONENTS.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(self.log_level)
            logger.addFilter(ContextFilter({'component': component}))

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def get_component_logger(self, component: str) -> logging.Logger:
        """Get a component-specific logger.

        Raises:
            ValueError: If component is not recognized
        """
        if component not in self.COMPONENTS:
            raise ValueError(f"Unknown component: {component}. Available: {list(self.COMPONENTS.keys())}")

        return logging.getLogger(self.COMPONENTS[component])


_logger_config: Optional[LoggerConfig] = None


def setup_logging(
    environment: str = 'development',
    log_level: str = 'INFO',
    format_type: str = 'text',
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> LoggerConfig:
    """Setup application logging.

    Returns:
        LoggerConfig: Configured logger instance
    """
    global _logger_config
    _logger_config = LoggerConfig(
        environment=environment,
        log_level=log_level,
        format_type=format_type,
        log_file=log_file,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
    return _logger_config


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance, configuring defaults on first use."""
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_logger(name)


def get_component_logger(component: str) -> logging.Logger:
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_component_logger(component)


def get_api_logger() -> logging.Logger:
    """Get API component logger."""
    return get_component_logger('api')


def get_database_logger() -> logging.Logger:
    """Get database component logger."""
    return get_component_logger('database')


def get_cache_logger() -> logging.Logger:
    """Get cache component logger."""
    return get_component_logger('cache')


def get_engine_logger() -> logging.Logger:
    """Get scoring engine logger."""
    return get_component_logger('engine')


def get_security_logger() -> logging.Logger:
    """Get security component logger."""
    return get_component_logger('security')


def get_business_logger() -> logging.Logger:
    """Get business logic logger."""
    return get_component_logger('business')


def log_api_response(method: str, path: str, status_code: int, duration_ms: float, logger: Optional[logging.Logger] = None) -> None:
    """Log API response.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
        logger: Logger instance
    """
    if logger is None:
        logger = get_api_logger()

    level = logging.WARNING if status_code >= 400 else logging.INFO

    logger.log(level, f"{method} {path} - {status_code}", extra={
        'http_method': method,
        'request_path': path,
        'status_code': status_code,
        'duration_ms': duration_ms,
        'event_type': 'api_response'
    })


def log_security_event(event_type: str, details: Dict[str, Any], severity: str = 'INFO', logger: Optional[logging.Logger] = None) -> None:
    """Log security event.

    Args:
        event_type: Type of security event
        details: Event details
        severity: Event severity (INFO, WARNING, ERROR, CRITICAL)
        logger: Logger instance
    """
    if logger is None:
        logger = get_security_logger()

    level = getattr(logging, severity.upper(), logging.INFO)

    logger.log(level, f"Security event: {event_type}", extra={
        'security_event_type': event_type,
        'event_details': details,
        'event_type': 'security_event'
    })


class PerformanceLogger:
    """Context manager for timing an operation."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, extra: Optional[Dict[str, Any]] = None):
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time:
            duration = datetime.now(timezone.utc) - self.start_time
            self.duration_ms = duration.total_seconds() * 1000

            # Warn on anything slower than one second
            level = logging.WARNING if self.duration_ms > 1000 else logging.DEBUG

            self.logger.log(level, f"Completed {self.operation}", extra={
                'operation': self.operation,
                'duration_ms': self.duration_ms,
                'event_type': 'performance_end',
                'success': exc_type is None,
                **self.extra
            })
