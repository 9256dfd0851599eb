"""
logging_config.py — Centralized Logging Configuration for the Users API

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so uvicorn, SQLAlchemy and alembic records route through
Loguru with the same format and request context.

Business Rules:
- All logs go through Loguru (no direct print() or stdlib handlers)
- JSON lines in production (APP_ENV=production) for machine parsing
- Human-readable format in development
- Every record carries extra.request_id ("-" outside a request)

Called by: users_api/main.py (create_app)
Depends on: users_api/config.py (log_level, app_env)
"""

import logging
import sys

from loguru import logger

from .config import get_settings


def setup_logging() -> None:
    """Configure Loguru and intercept stdlib logging.

    Safe to call more than once; each call replaces the previous handlers.
    """
    settings = get_settings()
    logger.remove()
    logger.configure(extra={"request_id": "-"})

    log_level = settings.log_level.upper()

    if settings.is_production:
        # JSON lines to stdout, the container runtime collects them
        logger.add(
            sys.stdout,
            level=log_level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<magenta>{extra[request_id]}</magenta> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            colorize=True,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for noisy in ("uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured", level=log_level, production=settings.is_production)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from stdlib logging internals so Loguru reports the real caller
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
