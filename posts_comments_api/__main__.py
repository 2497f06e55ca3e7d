"""
Process entry point: ``python -m posts_comments_api``.

Serves the application with uvicorn on ``API_HOST:PORT``. uvicorn stops
accepting connections on SIGINT/SIGTERM and lets in-flight requests finish.
"""

import uvicorn

from posts_comments_api.config import get_settings
from posts_comments_api.utils.logging_utils import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging()

    from posts_comments_api.api.main import app

    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SECONDS,
    )


if __name__ == "__main__":
    main()
