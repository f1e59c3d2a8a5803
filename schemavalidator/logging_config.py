"""Logging configuration for schemavalidator.

The library never configures logging on import; the CLI calls
``configure_logging()`` once at startup. Library modules log through
``logging.getLogger(__name__)``.
"""

import logging
import sys
from typing import Literal

from schemavalidator.settings import get_settings

# Third-party loggers that would otherwise drown out validator output
NOISY_LOGGERS = [
    "markdown_it",
    "asyncio",
]


def suppress_noisy_loggers() -> None:
    """Suppress noisy third-party loggers to WARNING."""
    for logger_name in NOISY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.handlers.clear()


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
) -> None:
    """Configure application logging.

    Sets up:
    - a single stderr console handler at the configured level
    - the ``schemavalidator`` logger at the configured level
    - third-party library logs suppressed to WARNING+

    Args:
        level: Override log level (defaults to settings.log_level)
    """
    settings = get_settings()
    log_level = level or settings.log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handler level
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(
        logging.Formatter(
            "%(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("schemavalidator").setLevel(getattr(logging, log_level))

    suppress_noisy_loggers()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
