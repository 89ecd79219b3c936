"""Application lifecycle event handlers for CareerPilot.

Startup connects MongoDB (required), ensures indexes, connects Redis when
caching is enabled and warms the catalog cache. Redis is optional: a failed
connection only disables the cache for this process.
"""

from typing import Callable, List, Tuple

from fastapi import FastAPI

from careerpilot.core.config import get_settings
from careerpilot.database.mongodb import MongoDB
from careerpilot.database.redis_client import RedisClient
from careerpilot.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)

CRITICAL_STARTUP_TASKS = {"Database Connection"}


class StartupEvent:
    """Handles application startup tasks."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.tasks: List[str] = []
        self.failed_tasks: List[Tuple[str, str]] = []

    async def execute(self) -> None:
        """Execute all startup tasks in order.

        Raises:
            RuntimeError: When a critical task fails
        """
        logger.info(
            "Starting application startup sequence",
            extra={
                "app_name": settings.APP_NAME,
                "version": settings.APP_VERSION,
                "environment": settings.APP_ENV,
            }
        )

        startup_tasks = [
            ("Database Connection", self._connect_database),
            ("Database Indexes", self._create_indexes),
            ("Redis Connection", self._connect_redis),
            ("Cache Warming", self._warm_cache),
        ]

        for task_name, task_func in startup_tasks:
            try:
                logger.info(f"Starting: {task_name}")
                await task_func()
                self.tasks.append(task_name)
                logger.info(f"Completed: {task_name}")
            except Exception as e:
                logger.error(
                    f"Failed: {task_name}",
                    extra={"error": str(e)},
                    exc_info=True
                )
                self.failed_tasks.append((task_name, str(e)))

                if task_name in CRITICAL_STARTUP_TASKS:
                    raise RuntimeError(
                        f"Critical startup task failed: {task_name}. Error: {str(e)}"
                    ) from e

        self._log_startup_summary()

    async def _connect_database(self) -> None:
        await MongoDB.connect(
            url=settings.get_database_url(),
            db_name=settings.MONGODB_DB_NAME,
        )

    async def _create_indexes(self) -> None:
        await MongoDB.create_indexes()

    async def _connect_redis(self) -> None:
        if not settings.ENABLE_CACHE:
            logger.info("Cache disabled, skipping Redis connection")
            return
        await RedisClient.connect(url=settings.REDIS_URL)

    async def _warm_cache(self) -> None:
        """Load the career catalog so the first submission hits the cache."""
        if not settings.ENABLE_CACHE or not RedisClient.is_connected():
            return

        from careerpilot.services.career_service import CareerService

        careers = await CareerService().list_careers()
        logger.info("Career catalog cache warmed", extra={"careers": len(careers)})

    def _log_startup_summary(self) -> None:
        summary = {
            "successful_tasks": len(self.tasks),
            "failed_tasks": len(self.failed_tasks),
            "tasks": self.tasks,
            "failures": self.failed_tasks,
            "environment": settings.APP_ENV,
            "cache_enabled": settings.ENABLE_CACHE and RedisClient.is_connected(),
            "metrics_enabled": settings.ENABLE_METRICS,
        }

        if self.failed_tasks:
            logger.warning("Application started with errors", extra=summary)
        else:
            logger.info("Application started successfully", extra=summary)


class ShutdownEvent:
    """Handles application shutdown tasks."""

    def __init__(self, app: FastAPI):
        self.app = app

    async def execute(self) -> None:
        logger.info("Starting application shutdown sequence")

        shutdown_tasks = [
            ("Close Redis Connection", RedisClient.disconnect),
            ("Close Database Connection", MongoDB.disconnect),
        ]

        for task_name, task_func in shutdown_tasks:
            try:
                logger.info(f"Executing: {task_name}")
                await task_func()
                logger.info(f"Completed: {task_name}")
            except Exception as e:
                logger.error(f"Error during {task_name}: {str(e)}", exc_info=True)

        logger.info("Application shutdown complete")


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler for the application."""
    async def start_app() -> None:
        await StartupEvent(app).execute()

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler for the application."""
    async def stop_app() -> None:
        await ShutdownEvent(app).execute()

    return stop_app


__all__ = [
    "ShutdownEvent",
    "StartupEvent",
    "create_start_app_handler",
    "create_stop_app_handler",
]
