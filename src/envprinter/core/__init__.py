"""Core scanning and filtering for env-printer."""

from envprinter.core.exclusion import (
    CatalogExclusionPolicy,
    ExclusionPolicy,
    PolicyListExclusionPolicy,
    build_exclusion_policy,
)
from envprinter.core.filter import EnvFilterEngine, process_environment
from envprinter.core.scan import EnvUsageScanner, PatternScanner, UsageIndex

__all__ = [
    "CatalogExclusionPolicy",
    "ExclusionPolicy",
    "PolicyListExclusionPolicy",
    "build_exclusion_policy",
    "EnvFilterEngine",
    "process_environment",
    "EnvUsageScanner",
    "PatternScanner",
    "UsageIndex",
]
