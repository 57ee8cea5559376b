"""Error handling utilities for env-printer."""

from __future__ import annotations

from typing import Any

from envprinter.models.common import ErrorRecord


class EnvPrinterError(Exception):
    """Base exception for env-printer."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_record(self) -> ErrorRecord:
        """Convert to ErrorRecord model."""
        return ErrorRecord(code=self.code, message=self.message, details=self.details)


class ConfigurationError(EnvPrinterError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ScanError(EnvPrinterError):
    """Scanning a resource location failed."""

    def __init__(self, message: str, location: str | None = None):
        details = {"location": location} if location else {}
        super().__init__(message, code="SCAN_ERROR", details=details)


def safe_get(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Safely get a nested value from a dictionary.

    Args:
        data: Dictionary to get value from
        *keys: Keys to traverse
        default: Default value if key not found

    Returns:
        Value at the nested key path, or default
    """
    current = data
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
            if current is None:
                return default
        else:
            return default
    return current
