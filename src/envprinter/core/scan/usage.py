"""Usage scanning: which environment variables does the project reference?"""

from __future__ import annotations

import threading
from typing import Callable, Iterable

from envprinter.core.scan.patterns import PatternScanner
from envprinter.core.scan.resources import (
    CONFIG_GLOBS,
    FilesystemResourceWalker,
    ResourceWalker,
)
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)


class EnvUsageScanner:
    """Scans application config files for environment variable references."""

    def __init__(
        self,
        walker: ResourceWalker | None = None,
        globs: Iterable[str] = CONFIG_GLOBS,
        pattern_scanner: PatternScanner | None = None,
    ) -> None:
        self.walker = walker or FilesystemResourceWalker()
        self.globs = tuple(globs)
        self.pattern_scanner = pattern_scanner or PatternScanner()

    def scan(self) -> frozenset[str]:
        """Collect the names of every referenced environment variable.

        Never raises. An unexpected failure part-way through is logged and
        whatever was found up to that point is returned; an empty set means
        no usage was detected.
        """
        used: set[str] = set()
        files = 0
        try:
            for resource in self.walker.walk(self.globs):
                files += 1
                for line in resource.lines():
                    for name in self.pattern_scanner.accepted_names(line):
                        if name not in used:
                            logger.debug("Found environment variable reference %s in %s", name, resource.id)
                        used.add(name)
            self.walker.scan_compiled_sources()
            logger.debug(
                "Found %d environment variables in use across the project",
                len(used),
                extra={"extra_fields": {"files": files, "names": len(used)}},
            )
        except Exception as e:
            logger.warning("Error scanning project for environment variable usage: %s", e)
        return frozenset(used)


class UsageIndex:
    """Write-once cell holding the result of a usage scan.

    The scan runs on the first ``get()``; concurrent first callers wait for
    that single scan rather than starting their own. Once published the set
    is read without locking.
    """

    def __init__(self, scan: Callable[[], Iterable[str]]):
        self._scan = scan
        self._lock = threading.Lock()
        self._names: frozenset[str] | None = None

    @property
    def computed(self) -> bool:
        """Whether the scan has run and its result is published."""
        return self._names is not None

    def get(self) -> frozenset[str]:
        names = self._names
        if names is not None:
            return names
        with self._lock:
            if self._names is None:
                self._names = frozenset(self._scan())
            return self._names
