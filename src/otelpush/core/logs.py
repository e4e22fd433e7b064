"""Logging helpers shared by the core and the adapters."""

import logging
import sys

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line runs.

    Args:
        level: Level name (e.g., "DEBUG", "INFO"). Unknown names fall back
            to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=DEFAULT_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def log_exception(message: str, logger_name: str = "otelpush") -> None:
    """Log the exception currently being handled, with traceback.

    Must be called from inside an ``except`` block.

    Args:
        message: Context message logged alongside the exception.
        logger_name: Name of the logger to write to.
    """
    logging.getLogger(logger_name).exception(message)
