"""Main entry point for the CareerPilot application.

Runs the FastAPI application under uvicorn with settings taken from the
environment.
"""

import uvicorn

from careerpilot.core.config import get_settings

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "careerpilot.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.APP_ENV == "development",
        log_config=None,  # Use our custom logging
        access_log=False,  # Handled by middleware
        workers=1 if settings.APP_ENV == "development" else 4,
    )
