"""Utility functions for env-printer."""

from envprinter.utils.logging import configure_logging, get_logger
from envprinter.utils.errors import (
    EnvPrinterError,
    ConfigurationError,
    ScanError,
    safe_get,
)
from envprinter.utils.config import (
    EnvPrinterSettings,
    ExclusionStrategy,
    load_settings,
    read_application_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "EnvPrinterError",
    "ConfigurationError",
    "ScanError",
    "safe_get",
    # Config
    "EnvPrinterSettings",
    "ExclusionStrategy",
    "load_settings",
    "read_application_config",
]
