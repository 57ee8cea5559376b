"""Exclusion policies that drop OS and platform noise from reports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from envprinter.knowledge.os_vars import PREFIX_MARKER, get_os_exclusion_catalog
from envprinter.utils.config import EnvPrinterSettings, ExclusionStrategy
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)


class ExclusionPolicy(ABC):
    """Decides whether a variable is noise that should not be reported."""

    @abstractmethod
    def is_excluded(self, name: str) -> bool:
        ...

    def is_included(self, name: str) -> bool:
        """Whether a live variable is explicitly wanted in project-only mode."""
        return False


class CatalogExclusionPolicy(ExclusionPolicy):
    """Excludes names from a built-in catalog of exact names and prefixes.

    Args:
        entries: Catalog entries; those ending in ``_`` are prefixes.
            Defaults to the built-in OS catalog.
        extra: Operator-supplied entries added to the catalog
    """

    def __init__(self, entries: Iterable[str] | None = None, extra: Iterable[str] = ()):
        catalog = list(get_os_exclusion_catalog() if entries is None else entries)
        catalog.extend(extra)
        self.exact = frozenset(e for e in catalog if e and not e.endswith(PREFIX_MARKER))
        self.prefixes = tuple(sorted({e for e in catalog if e.endswith(PREFIX_MARKER)}))

    def is_excluded(self, name: str) -> bool:
        return name in self.exact or name.startswith(self.prefixes)


class PolicyListExclusionPolicy(ExclusionPolicy):
    """Operator-configured deny-list and allow-list, both matched by prefix."""

    def __init__(self, exclude_prefixes: Iterable[str] = (), include_patterns: Iterable[str] = ()):
        self.exclude_prefixes = tuple(p for p in exclude_prefixes if p)
        self.include_patterns = tuple(p for p in include_patterns if p)

    def is_excluded(self, name: str) -> bool:
        return name.startswith(self.exclude_prefixes)

    def is_included(self, name: str) -> bool:
        return name.startswith(self.include_patterns)


def build_exclusion_policy(settings: EnvPrinterSettings) -> ExclusionPolicy:
    """Create the exclusion policy selected by the settings."""
    if settings.exclusion_strategy == ExclusionStrategy.POLICY_LIST:
        logger.debug(
            "Using policy-list exclusion with %d exclude prefixes and %d include patterns",
            len(settings.exclude_prefixes),
            len(settings.include_patterns),
        )
        return PolicyListExclusionPolicy(settings.exclude_prefixes, settings.include_patterns)
    return CatalogExclusionPolicy(extra=settings.extra_excludes)
