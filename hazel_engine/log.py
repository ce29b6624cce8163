"""Engine and application loggers writing to the console and a log file."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"
DEFAULT_LOG_FILE = "Hazel.log"

_TIME_FORMAT = "%H:%M:%S"
_CONSOLE_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_FILE_PATTERN = "[%(asctime)s] [%(level)s] %(name)s: %(message)s"

_LEVEL_NAMES = (
    (logging.CRITICAL, "critical"),
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
    (logging.DEBUG, "debug"),
)


def _level_name(levelno: int) -> str:
    for threshold, name in _LEVEL_NAMES:
        if levelno >= threshold:
            return name
    return "trace"


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level = _level_name(record.levelno)
        return super().format(record)


def _release_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def init_logging(log_path: str = DEFAULT_LOG_FILE) -> None:
    """Set up both loggers; the log file is truncated on every call."""
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_Formatter(_CONSOLE_PATTERN, _TIME_FORMAT))
    log_file = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    log_file.setFormatter(_Formatter(_FILE_PATTERN, _TIME_FORMAT))

    for name in (CORE_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        _release_handlers(logger)
        logger.addHandler(console)
        logger.addHandler(log_file)
        logger.setLevel(1)
        logger.propagate = False


def core_logger() -> logging.Logger:
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    return logging.getLogger(CLIENT_LOGGER_NAME)