"""
Host lifecycle for the library: explicit enable / disable.

- ``enable`` builds the process-wide ``CustomLogger`` from settings and logs
  the startup line.
- ``disable`` writes the buffered log file and clears the instance. The host
  calls it from its own shutdown path; nothing is flushed implicitly.
- ``lifespan`` wraps both around a ``with`` block.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from smilelib.database.config.config import Settings, settings
from smilelib.logger.custom_logger import CustomLogger

_instance: Optional[CustomLogger] = None


def enable(config: Settings = settings) -> CustomLogger:
    """Create the process-wide logger. Calling it twice returns the same instance."""
    global _instance
    if _instance is None:
        _instance = CustomLogger(
            log_directory=config.LOG_DIRECTORY,
            discord_webhook_url=config.DISCORD_WEBHOOK_URL,
            level=logging.getLevelName(config.LOG_LEVEL),
        )
        _instance.info("SmileLib enabled")
    return _instance


def get_instance() -> Optional[CustomLogger]:
    """Return the logger created by ``enable``, or None before it or after ``disable``."""
    return _instance


def disable() -> Optional[Path]:
    """Flush the shutdown log file and drop the instance."""
    global _instance
    if _instance is None:
        return None
    _instance.info("SmileLib disabled")
    log_file = _instance.shutdown()
    _instance = None
    return log_file


@contextmanager
def lifespan(config: Settings = settings) -> Iterator[CustomLogger]:
    """
    Enable the library for the duration of a ``with`` block.

    Example
    -------
    >>> with lifespan() as log:
    ...     log.info("working")
    """
    logger = enable(config)
    try:
        yield logger
    finally:
        disable()
