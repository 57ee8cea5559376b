"""Filtering engine that builds the reported view of the environment."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from envprinter.core.exclusion import ExclusionPolicy, build_exclusion_policy
from envprinter.core.scan.resources import FilesystemResourceWalker
from envprinter.core.scan.usage import EnvUsageScanner, UsageIndex
from envprinter.models.env import EMPTY_PLACEHOLDER, UNSET_MARKER, FilteredResult
from envprinter.utils.config import EnvPrinterSettings
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)


def process_environment() -> Mapping[str, str]:
    """Take a read-only snapshot of the process environment."""
    return MappingProxyType(dict(os.environ))


class EnvFilterEngine:
    """Combines detected usage, the live environment and an exclusion policy.

    Example:
        engine = EnvFilterEngine(EnvPrinterSettings(project_only=True))
        result = engine.get_filtered_environment()
        for name, value in result.variables.items():
            print(name, value)

    Args:
        settings: Filtering mode and value visibility
        exclusion_policy: Noise filter. Defaults to the one the settings select.
        scan: Returns the names referenced by the project. Defaults to scanning
            application config files on ``settings.search_path``. Runs at most
            once per engine.
        environ: Returns an environment snapshot. Defaults to ``os.environ``.
    """

    def __init__(
        self,
        settings: EnvPrinterSettings,
        exclusion_policy: ExclusionPolicy | None = None,
        scan: Callable[[], Iterable[str]] | None = None,
        environ: Callable[[], Mapping[str, str]] | None = None,
    ) -> None:
        self.settings = settings
        self.exclusion_policy = exclusion_policy or build_exclusion_policy(settings)
        if scan is None:
            scan = EnvUsageScanner(FilesystemResourceWalker(settings.search_path)).scan
        self._scan = scan
        self._environ = environ or process_environment
        self._usage = UsageIndex(self._compute_usage)

    @property
    def usage_index(self) -> UsageIndex:
        return self._usage

    def used_variables(self) -> frozenset[str]:
        """Names referenced by the project, scanning on first use."""
        return self._usage.get()

    def get_filtered_environment(self) -> FilteredResult:
        """Build the filtered, name-ordered view of the environment.

        Never raises; a failure is logged and reported as an empty result.
        """
        settings = self.settings
        try:
            snapshot = self._environ()
            if settings.project_only:
                variables, unset = self._project_variables(snapshot)
            else:
                variables = {
                    k: v for k, v in snapshot.items() if not self.exclusion_policy.is_excluded(k)
                }
                unset = []
        except Exception as e:
            logger.warning("Failed to filter environment variables: %s", e)
            variables, unset = {}, []

        ordered = {k: variables[k] for k in sorted(variables)}
        if not settings.show_values:
            ordered = dict.fromkeys(ordered, EMPTY_PLACEHOLDER)

        return FilteredResult(
            variables=ordered,
            project_only=settings.project_only,
            show_values=settings.show_values,
            unset=sorted(unset),
        )

    def _project_variables(self, snapshot: Mapping[str, str]) -> tuple[dict[str, str], list[str]]:
        policy = self.exclusion_policy
        variables: dict[str, str] = {}
        unset: list[str] = []

        for name in self._usage.get():
            if policy.is_excluded(name):
                continue
            value = snapshot.get(name)
            if value is None:
                variables[name] = UNSET_MARKER
                unset.append(name)
            else:
                variables[name] = value

        for name, value in snapshot.items():
            if name not in variables and policy.is_included(name) and not policy.is_excluded(name):
                variables[name] = value

        return variables, unset

    def _compute_usage(self) -> frozenset[str]:
        try:
            names = frozenset(self._scan())
        except Exception as e:
            logger.warning("Error scanning project for environment variable usage: %s", e)
            return frozenset()
        try:
            self._log_usage_summary(names)
        except Exception as e:
            logger.warning("Failed to summarize detected environment variables: %s", e)
        return names

    def _log_usage_summary(self, names: frozenset[str]) -> None:
        # Values are secrets in most deployments; only logged when show_values is on
        snapshot = self._environ()
        reported = sorted(n for n in names if not self.exclusion_policy.is_excluded(n))
        unset = [n for n in reported if n not in snapshot]
        logger.info(
            "Detected %d environment variables used by the project (%d set, %d unset)",
            len(reported),
            len(reported) - len(unset),
            len(unset),
        )
        for name in reported:
            if name in unset:
                logger.info("  %s = %s", name, UNSET_MARKER)
            elif self.settings.show_values:
                logger.info("  %s = %s", name, snapshot[name])
            else:
                logger.info("  %s", name)
