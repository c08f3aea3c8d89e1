# src/task_dashboard/logging_setup.py

"""
Logging for the dashboard.

The dashboard itself prints to stdout; logging goes elsewhere:
- stderr, filtered, so facade failures ("weather unknown", "no stories")
  show up without burying the dashboard
- <data_dir>/task_dashboard.log with everything, including per-request
  httpx lines
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_dashboard.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_PREFIX = "task_dashboard."
HTTP_LOGGER_PREFIXES = ("httpx", "httpcore")


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console rules:
    - task_dashboard.* passes (handler level still applies)
    - httpx/httpcore only WARNING+ (httpx logs every request at INFO)
    - anything else, including captured 'py.warnings', only ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(APP_LOGGER_PREFIX):
            return True
        if record.name.startswith(HTTP_LOGGER_PREFIXES):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def _formatter() -> logging.Formatter:
    return logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_dashboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Replace root handlers with the console + file pair and return the log file path.

    Call once from the entrypoint, before the first log line.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_formatter())
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(_formatter())
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
