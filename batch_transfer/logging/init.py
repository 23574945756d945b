from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line on stdout starts with one of INFO|WARN|ERROR|SUMMARY. The
SUMMARY level sits between INFO and WARNING and carries the single
per-upload summary line. Module loggers are children of ``batch_transfer``
and propagate to the handler installed here.

Messages about one upload go through ``upload_logger`` so every line names
the file it concerns (``WARN batch.csv: no data rows``).
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "setup_logging",
    "get_logger",
    "UploadLogAdapter",
    "upload_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "batch_transfer"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes each message with its level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Setup logging with labeled prefixes for the application.

    Idempotent: a second call returns the already configured logger.

    Returns:
        Configured ``batch_transfer`` logger
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


class UploadLogAdapter(logging.LoggerAdapter):
    """Prefix messages with the upload they belong to."""

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {})["upload"] = self.extra["upload"]
        return f"{self.extra['upload']}: {msg}", kwargs


def upload_logger(logger: logging.Logger, upload: str) -> UploadLogAdapter:
    """Wrap ``logger`` for messages about one upload.

    The upload name is also attached to each record as ``record.upload``.
    """
    return UploadLogAdapter(logger, {"upload": upload})


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
