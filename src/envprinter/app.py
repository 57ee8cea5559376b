"""Composition of the filtering engine from settings."""

from __future__ import annotations

from envprinter.core.exclusion import build_exclusion_policy
from envprinter.core.filter import EnvFilterEngine
from envprinter.core.scan.resources import FilesystemResourceWalker
from envprinter.core.scan.usage import EnvUsageScanner
from envprinter.utils.config import EnvPrinterSettings


def build_engine(settings: EnvPrinterSettings) -> EnvFilterEngine:
    """Wire the scanner, exclusion policy and engine for a set of settings."""
    scanner = EnvUsageScanner(FilesystemResourceWalker(settings.search_path))
    return EnvFilterEngine(
        settings,
        exclusion_policy=build_exclusion_policy(settings),
        scan=scanner.scan,
    )
