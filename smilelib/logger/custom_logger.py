"""
Custom Logger
=============

A small façade over the standard ``logging`` module for hosts that embed the
library.

Key features
~~~~~~~~~~~~
- Colored console output: INFO green, WARNING yellow, ERROR red. INFO and
  WARNING go to stdout, ERROR and above to stderr.
- Shutdown log file: every record is kept in memory and written to
  ``log_YYYYmmdd_HHMMSS.txt`` in the log directory when the host calls
  ``shutdown()``. There is no atexit hook; the host decides when.
- Discord webhook: ERROR records are posted as ``{"content": ...}`` when a
  webhook URL is configured. Delivery problems go through
  ``logging.Handler.handleError`` and never reach the caller.

The façade logs through the ``smilelib`` logger by default, so records from
the library's own modules (``smilelib.*``) end up in the same outputs.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import requests

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

INFO_COLOR = "\033[32m"   # green
WARN_COLOR = "\033[33m"   # yellow
ERROR_COLOR = "\033[31m"  # red
RESET = "\033[0m"

DISCORD_CONTENT_LIMIT = 2000


class ColorFormatter(logging.Formatter):
    """Formatter that wraps each line in the ANSI color of its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            color = ERROR_COLOR
        elif record.levelno >= logging.WARNING:
            color = WARN_COLOR
        else:
            color = INFO_COLOR
        return f"{color}{message}{RESET}"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


class ShutdownFileHandler(logging.Handler):
    """
    Keeps formatted records in memory and writes them out on demand.

    Parameters
    ----------
    log_directory : str | Path
        Directory for the log files; created if missing.
    """

    def __init__(self, log_directory, level: int = logging.NOTSET):
        super().__init__(level)
        self.log_directory = Path(log_directory)
        self.log_directory.mkdir(parents=True, exist_ok=True)
        self.buffer: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.append(self.format(record))
        except Exception:
            self.handleError(record)

    def flush_to_file(self) -> Path:
        """
        Write the buffered lines to a file named after the current time and
        empty the buffer.

        Returns
        -------
        Path
            The file that was written.
        """
        self.acquire()
        try:
            shutdown_time = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = self.log_directory / f"log_{shutdown_time}.txt"
            with open(log_file, "a", encoding="utf-8") as f:
                for line in self.buffer:
                    f.write(line + "\n")
            self.buffer = []
            return log_file
        finally:
            self.release()


class DiscordWebhookHandler(logging.Handler):
    """Posts ERROR (and above) records to a Discord webhook."""

    def __init__(self, webhook_url: str, timeout: float = 10.0, level: int = logging.ERROR):
        super().__init__(level)
        self.webhook_url = webhook_url
        self.timeout = timeout

    def emit(self, record: logging.LogRecord) -> None:
        try:
            content = self.format(record)[:DISCORD_CONTENT_LIMIT]
            response = requests.post(self.webhook_url, json={"content": content}, timeout=self.timeout)
            # Discord answers 204 No Content on success
            if response.status_code not in (200, 204):
                raise RuntimeError(f"Failed to send Discord webhook: HTTP {response.status_code}")
        except Exception:
            self.handleError(record)


class CustomLogger:
    """
    Console, shutdown-file and webhook logging behind one object.

    Parameters
    ----------
    log_directory : str | Path
        Where ``shutdown()`` writes the buffered log file.
    discord_webhook_url : str | None
        Webhook for ERROR records; None or "" disables it.
    name : str
        Name of the underlying ``logging`` logger.
    level : int | str
        Minimum level handled.
    """

    def __init__(self, log_directory, discord_webhook_url: Optional[str] = None,
                 name: str = "smilelib", level=logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self._previous_propagate = self.logger.propagate
        self.logger.propagate = False

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.addFilter(_BelowLevelFilter(logging.ERROR))
        stdout_handler.setFormatter(ColorFormatter(LOG_FORMAT, DATE_FORMAT))

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.ERROR)
        stderr_handler.setFormatter(ColorFormatter(LOG_FORMAT, DATE_FORMAT))

        self.file_handler = ShutdownFileHandler(log_directory)
        self.file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

        self.handlers: List[logging.Handler] = [stdout_handler, stderr_handler, self.file_handler]
        if discord_webhook_url:
            webhook_handler = DiscordWebhookHandler(discord_webhook_url)
            webhook_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            self.handlers.append(webhook_handler)

        for handler in self.handlers:
            self.logger.addHandler(handler)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str, exc: Optional[BaseException] = None) -> None:
        """Log an error, with the traceback of ``exc`` when given."""
        self.logger.error(message, exc_info=exc)

    def shutdown(self) -> Path:
        """
        Write the buffered records to the log directory and detach every
        handler, giving the logger back its previous propagation. Call once,
        when the host shuts down.

        Returns
        -------
        Path
            The log file that was written.
        """
        log_file = self.file_handler.flush_to_file()
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.propagate = self._previous_propagate
        return log_file
