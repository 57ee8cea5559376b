"""Resource discovery and line reading for usage scanning."""

from __future__ import annotations

from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator

from envprinter.utils.errors import ScanError
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_GLOBS = ("application*.properties", "application*.yml", "application*.yaml")


class TextResource(ABC):
    """A readable text resource found on the search path."""

    def __init__(self, id: str):
        self.id = id

    @abstractmethod
    def open_lines(self) -> Iterator[str]:
        """Read the resource line by line. May raise OSError."""
        ...

    def lines(self) -> Iterator[str]:
        """Iterate the resource's lines, ending early if reading fails.

        Every call starts a fresh read.
        """
        try:
            for line in self.open_lines():
                yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Error reading resource %s: %s", self.id, e)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"


class FileResource(TextResource):
    """A text file on disk."""

    def __init__(self, path: Path):
        super().__init__(str(path))
        self.path = path

    def open_lines(self) -> Iterator[str]:
        with self.path.open("r", encoding="utf-8", errors="replace") as f:
            yield from f


class MemoryResource(TextResource):
    """An in-memory text resource for testing."""

    def __init__(self, id: str, content: str):
        super().__init__(id)
        self.content = content

    def open_lines(self) -> Iterator[str]:
        yield from self.content.splitlines()


class ResourceWalker(ABC):
    """Resolves location globs to readable text resources."""

    @abstractmethod
    def resolve(self, glob: str) -> list[TextResource]:
        """Return the readable resources matching a glob.

        Raises:
            ScanError: If the glob cannot be resolved at all
        """
        ...

    def walk(self, globs: Iterable[str]) -> Iterator[TextResource]:
        """Lazily yield resources for each glob, each resource at most once.

        A glob that cannot be resolved is skipped.
        """
        seen: set[str] = set()
        for glob in globs:
            try:
                resources = self.resolve(glob)
            except ScanError as e:
                logger.debug("Could not scan pattern %s: %s", glob, e)
                continue
            for resource in resources:
                if resource.id in seen:
                    continue
                seen.add(resource.id)
                yield resource

    def scan_compiled_sources(self) -> None:
        """Compiled artifacts carry no source text, so there is nothing to scan."""
        logger.debug("Source scanning is not available for compiled artifacts")


class FilesystemResourceWalker(ResourceWalker):
    """Resolves globs against every directory on a search path.

    Globs are matched directly inside each directory, not recursively,
    mirroring how resources are looked up at the root of each path entry.
    """

    def __init__(self, search_path: Iterable[str | Path] = (".",)):
        self.search_path = [Path(p) for p in search_path]

    def resolve(self, glob: str) -> list[TextResource]:
        found: list[TextResource] = []
        for root in self.search_path:
            if not root.is_dir():
                logger.debug("Skipping missing search path entry %s", root)
                continue
            try:
                paths = sorted(root.glob(glob))
            except (OSError, ValueError, NotImplementedError) as e:
                raise ScanError(f"Cannot resolve {glob}: {e}", location=str(root)) from e
            for path in paths:
                if path.is_file():
                    found.append(FileResource(path))
        return found


class MemoryResourceWalker(ResourceWalker):
    """In-memory resource walker for testing."""

    def __init__(self, files: dict[str, str]):
        self._files = files

    def resolve(self, glob: str) -> list[TextResource]:
        return [
            MemoryResource(name, content)
            for name, content in sorted(self._files.items())
            if fnmatchcase(name.rsplit("/", 1)[-1], glob)
        ]
