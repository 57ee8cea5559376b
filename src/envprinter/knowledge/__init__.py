"""Curated knowledge about platform-injected environment variables."""

from envprinter.knowledge.os_vars import PREFIX_MARKER, get_os_exclusion_catalog

__all__ = [
    "PREFIX_MARKER",
    "get_os_exclusion_catalog",
]
