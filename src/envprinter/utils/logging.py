"""Structured logging utilities."""

import logging
import sys


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log messages."""

    def format(self, record: logging.LogRecord) -> str:
        # Add extra fields if present
        extra = ""
        if hasattr(record, "extra_fields"):
            fields = getattr(record, "extra_fields")
            if fields:
                extra = " " + " ".join(f"{k}={v}" for k, v in fields.items())

        message = super().format(record)
        return f"{message}{extra}"


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Configure logging for env-printer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        structured: Use structured logging format
    """
    if format_string is None:
        if structured:
            format_string = "%(asctime)s %(levelname)s %(name)s %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(sys.stderr)

    if structured:
        handler.setFormatter(StructuredFormatter(format_string))
    else:
        handler.setFormatter(logging.Formatter(format_string))

    # Configure root logger for envprinter
    logger = logging.getLogger("envprinter")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an env-printer module.

    Args:
        name: Module name (will be prefixed with envprinter)

    Returns:
        Configured logger
    """
    if not name.startswith("envprinter"):
        name = f"envprinter.{name}"
    return logging.getLogger(name)
