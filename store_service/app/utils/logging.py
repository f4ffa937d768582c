"""
Store Service Logging Module
============================
Self-contained structured logging setup for Store Service.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

# LogRecord attributes that are never copied into the JSON payload
_RESERVED_RECORD_FIELDS = [
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "getMessage",
    "exc_info",
    "exc_text",
    "stack_info",
]


class StoreJSONFormatter(logging.Formatter):
    """Custom JSON formatter for Store Service structured logging"""

    def __init__(self, exclude_fields: Optional[List[str]] = None):
        super().__init__()
        self.exclude_fields = exclude_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "service": "store_service",
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields from record
        skipped = _RESERVED_RECORD_FIELDS + self.exclude_fields
        for key, value in record.__dict__.items():
            if key not in skipped:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_store_logging(
    service_name: str = "store_service",
    log_level: str = "INFO",
    enable_file_logging: bool = False,
    log_dir: Optional[str] = None,
    max_file_size: int = 100 * 1024 * 1024,  # 100MB
    backup_count: int = 5,
    exclude_fields: Optional[List[str]] = None,
) -> logging.Logger:
    """
    Setup structured logging for the Store Service logger tree.

    Handlers live on ``service_name`` only; component loggers obtained via
    ``get_store_logger`` propagate to it and inherit its level.

    Args:
        service_name: Logger name, normally ``store_service``
        log_level: Minimum level name for the logger and its handlers
        enable_file_logging: Also write rotating ``<name>.log`` and
            ``<name>_errors.log`` files
        log_dir: Directory for log files (defaults to ``store_service/logs``)
        max_file_size: Rotation threshold in bytes
        backup_count: Number of rotated files to keep
        exclude_fields: Extra record attributes to leave out of the payload

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplication
    logger.handlers.clear()

    json_formatter = StoreJSONFormatter(exclude_fields=exclude_fields)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(json_formatter)
    logger.addHandler(console_handler)

    if enable_file_logging:
        if log_dir is None:
            log_dir_path = Path(__file__).parent.parent.parent / "logs"
        else:
            log_dir_path = Path(log_dir)

        log_dir_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir_path / f"{service_name}.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(json_formatter)
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir_path / f"{service_name}_errors.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(json_formatter)
        logger.addHandler(error_handler)

    return logger


def mask_database_url(database_url: str) -> str:
    """Hide credentials in a SQLAlchemy URL before logging it."""
    if "@" not in database_url:
        return database_url
    scheme, _, rest = database_url.partition("://")
    return f"{scheme}://***@{rest.split('@', 1)[1]}"


def get_store_logger(name: str) -> logging.Logger:
    """Component logger under ``store_service`` with no handlers of its own."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()
    logger.propagate = True
    return logger
