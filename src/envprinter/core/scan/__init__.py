"""Detection of environment variables referenced by project files."""

from envprinter.core.scan.patterns import (
    ACCESS_PREFIXES,
    PatternScanner,
    is_likely_env_var,
    normalize_name,
)
from envprinter.core.scan.resources import (
    CONFIG_GLOBS,
    FileResource,
    FilesystemResourceWalker,
    MemoryResource,
    MemoryResourceWalker,
    ResourceWalker,
    TextResource,
)
from envprinter.core.scan.usage import EnvUsageScanner, UsageIndex

__all__ = [
    "ACCESS_PREFIXES",
    "PatternScanner",
    "is_likely_env_var",
    "normalize_name",
    "CONFIG_GLOBS",
    "FileResource",
    "FilesystemResourceWalker",
    "MemoryResource",
    "MemoryResourceWalker",
    "ResourceWalker",
    "TextResource",
    "EnvUsageScanner",
    "UsageIndex",
]
