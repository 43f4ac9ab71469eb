"""Logging configuration for the FastAPI application."""

import logging
import sys
from pathlib import Path

from finance_tracker.config import get_settings

# Define log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_NAME = "finance_tracker"

_handlers: list[logging.Handler] = []


def setup_logging(log_dir: str | Path | None = None) -> logging.Logger:
    """Configure logging for the application.

    Safe to call more than once; handlers installed by a previous call are
    replaced rather than duplicated.
    """
    if log_dir is None:
        log_dir = get_settings().log_dir
    logs_path = Path(log_dir)
    logs_path.mkdir(parents=True, exist_ok=True)

    # Create formatters
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # File handler - write to <log_dir>/app.log
    file_handler = logging.FileHandler(logs_path / "app.log")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Console handler - write to stdout
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers[:] = [file_handler, console_handler]

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Configure uvicorn loggers to use our handlers
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logger = logging.getLogger(logger_name)
        logger.handlers = []
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.propagate = False

    # App logger
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
