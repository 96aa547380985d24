"""Logging configuration."""

import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel


class LogConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    console_level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: Path | None = None


def setup_logging(config: LogConfig | None = None) -> None:
    """Set up logging configuration for the application.

    The console handler writes to stderr and only shows records at or above
    ``console_level`` so the interactive shell stays readable. The optional
    log file receives everything at ``level``.
    """
    if config is None:
        config = LogConfig()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(config.console_level.upper())
    handlers: list[logging.Handler] = [console_handler]

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)
        level: Explicit level; falls back to the LOG_LEVEL environment variable

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    log_level = level if level else os.getenv("LOG_LEVEL")
    if log_level:
        logger.setLevel(log_level.upper())

    return logger
