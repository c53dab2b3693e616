"""Logging configuration for the travel document codec."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime

from icao_mrtd.config import settings

# Custom log format with service name
DEFAULT_LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - [%(service_name)s] - [%(name)s] - "
    "[%(module)s.%(funcName)s:%(lineno)d] - %(message)s"
)

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

LOG_OFF_LEVEL = "OFF"  # Special string to turn off logging

# Library loggers stay silent unless the application configures logging
logging.getLogger("icao_mrtd").addHandler(logging.NullHandler())


class ServiceNameFilter(logging.Filter):
    """Filter to inject service name into log records."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        return True


class MRTDJSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "service": getattr(record, "service_name", "unknown"),
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(
    service_name: str = "icao-mrtd",
    log_level: str | None = None,
    log_format: str | None = None,
) -> logging.Handler | None:
    """
    Configure root logging for an application embedding the codec.

    Args:
        service_name: Name used to tag every record
        log_level: Level name or "OFF"; defaults to ``settings.log_level``
        log_format: "json", "text" or a logging format string;
            defaults to ``settings.log_format``

    Returns:
        The installed console handler, or None when logging is off
    """
    level_name = (log_level or settings.log_level).upper()
    format_name = log_format or settings.log_format

    root_logger = logging.getLogger()

    # Remove any existing handlers to prevent duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if level_name == LOG_OFF_LEVEL:
        root_logger.setLevel(logging.CRITICAL + 1)
        return None

    root_logger.setLevel(LOG_LEVELS.get(level_name, logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    if format_name.lower() == "json":
        formatter: logging.Formatter = MRTDJSONFormatter()
    elif format_name.lower() == "text":
        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
    else:
        formatter = logging.Formatter(format_name)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ServiceNameFilter(service_name))
    root_logger.addHandler(console_handler)

    get_logger(__name__).info("Logging configured. Service: %s, Level: %s", service_name, level_name)
    return console_handler


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger instance for the module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name or __name__)
