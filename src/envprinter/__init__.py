"""env-printer: report the environment variables a project actually uses.

Scans application config files for environment variable references,
then reports the live environment restricted to those names (or with
known OS and platform noise removed), ordered by name.

Usage:
    # Library API
    from envprinter import EnvPrinterSettings, build_engine

    engine = build_engine(EnvPrinterSettings(project_only=True, show_values=False))
    result = engine.get_filtered_environment()
    print(result.variables)

CLI:
    env-printer print
    env-printer show --format json
    env-printer scan
    env-printer serve --port 8080
"""

__version__ = "0.1.0"

from envprinter.utils.config import EnvPrinterSettings, ExclusionStrategy, load_settings
from envprinter.models.env import EMPTY_PLACEHOLDER, UNSET_MARKER, FilteredResult
from envprinter.core.exclusion import (
    CatalogExclusionPolicy,
    ExclusionPolicy,
    PolicyListExclusionPolicy,
)
from envprinter.core.filter import EnvFilterEngine
from envprinter.core.scan import EnvUsageScanner, PatternScanner, UsageIndex
from envprinter.app import build_engine
from envprinter.printer import print_environment

__all__ = [
    "__version__",
    # Config
    "EnvPrinterSettings",
    "ExclusionStrategy",
    "load_settings",
    # Models
    "EMPTY_PLACEHOLDER",
    "UNSET_MARKER",
    "FilteredResult",
    # Core
    "CatalogExclusionPolicy",
    "ExclusionPolicy",
    "PolicyListExclusionPolicy",
    "EnvFilterEngine",
    "EnvUsageScanner",
    "PatternScanner",
    "UsageIndex",
    "build_engine",
    "print_environment",
]
