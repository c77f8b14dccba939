"""Global logger configuration for piper."""

import logging
import sys

from piper.core.config import Settings, settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "piper",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        pydantic.ValidationError: If ``level`` is not a known log level.
    """
    config = Settings(
        LOG_LEVEL=level or settings.LOG_LEVEL,
        LOG_FORMAT=format_string or settings.LOG_FORMAT,
        LOG_DATEFMT=settings.LOG_DATEFMT,
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(config.level)
        logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger()
