"""Configuration support for env-printer.

Settings are read the way a Spring-style application declares them: the
``env.printer.*`` keys of ``application*.properties`` and
``application*.yml`` files on the search path, then an optional
``.env-printer.yaml`` file that overrides them.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from envprinter.utils.errors import ConfigurationError, safe_get
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)

PROPERTY_PREFIX = "env.printer."
LIST_FIELDS = ("extra_excludes", "exclude_prefixes", "include_patterns", "search_path")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


class ExclusionStrategy(str, Enum):
    """Which exclusion policy filters out platform noise."""

    CATALOG = "catalog"
    POLICY_LIST = "policy-list"


class EnvPrinterSettings(BaseModel):
    """Settings consumed by the filtering core and its adapters."""

    model_config = {"frozen": True, "extra": "forbid"}

    enabled: bool = Field(default=True, description="Enable the whole subsystem")
    endpoint_enabled: bool = Field(default=True, description="Expose the query endpoint")
    project_only: bool = Field(
        default=True, description="Only report variables referenced by the project"
    )
    show_values: bool = Field(
        default=False,
        description="Report real values instead of names only (exposes secrets to logs)",
    )
    exclusion_strategy: ExclusionStrategy = Field(
        default=ExclusionStrategy.CATALOG, description="Exclusion policy variant"
    )
    extra_excludes: list[str] = Field(
        default_factory=list,
        description="Additional catalog entries; a trailing '_' marks a prefix",
    )
    exclude_prefixes: list[str] = Field(
        default_factory=list, description="Deny-list prefixes (policy-list strategy)"
    )
    include_patterns: list[str] = Field(
        default_factory=list, description="Allow-list prefixes (policy-list strategy)"
    )
    search_path: list[str] = Field(
        default_factory=lambda: ["."],
        description="Directories scanned for application config files",
    )

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def _split_comma_lists(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


def normalize_key(key: str) -> str:
    """Map ``project-only``, ``projectOnly`` and ``project_only`` to one field name."""
    key = _CAMEL_BOUNDARY.sub(r"_\1", key.strip())
    return key.replace("-", "_").lower()


def get_config_paths() -> list[Path]:
    """Get possible override file paths, most specific first."""
    return [
        Path.cwd() / ".env-printer.yaml",
        Path.cwd() / ".env-printer.yml",
        Path.home() / ".config" / "env-printer" / "config.yaml",
    ]


def read_properties(path: Path) -> dict[str, str]:
    """Read ``env.printer.*`` entries from a ``.properties`` file.

    Args:
        path: Properties file to read

    Returns:
        Mapping of normalized setting names to raw string values
    """
    values: dict[str, str] = {}
    try:
        # Properties files are ISO-8859-1 by convention
        text = path.read_text(encoding="latin-1")
    except OSError as e:
        logger.warning("Skipping unreadable config file %s: %s", path, e)
        return values
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        if key.startswith(PROPERTY_PREFIX):
            values[normalize_key(key[len(PROPERTY_PREFIX):])] = value.strip()
    return values


def read_application_yaml(path: Path) -> dict[str, Any]:
    """Read the ``env.printer`` section of every document in a YAML file.

    Application files often carry build-time tokens such as ``@project.version@``
    that are not valid YAML; such files contribute no settings.
    """
    values: dict[str, Any] = {}
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
        documents = list(yaml.safe_load_all(text))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Skipping settings in %s: %s", path, e)
        return values

    for doc in documents:
        if not isinstance(doc, dict):
            continue
        section = safe_get(doc, "env", "printer")
        if section is None:
            section = doc.get("env.printer")
        if isinstance(section, dict):
            values.update({normalize_key(k): v for k, v in section.items()})
    return values


def read_application_config(search_path: list[str]) -> dict[str, Any]:
    """Collect settings declared in application config files on the search path.

    Later files override earlier ones; within a directory properties files are
    read before YAML files.
    """
    values: dict[str, Any] = {}
    for root in search_path:
        directory = Path(root)
        if not directory.is_dir():
            continue
        for path in sorted(directory.glob("application*.properties")):
            values.update(read_properties(path))
        for pattern in ("application*.yml", "application*.yaml"):
            for path in sorted(directory.glob(pattern)):
                values.update(read_application_yaml(path))
    return values


def _read_override_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return {normalize_key(k): v for k, v in data.items()}


def load_settings(
    config_path: Path | str | None = None,
    search_path: list[str] | None = None,
    **overrides: Any,
) -> EnvPrinterSettings:
    """Load settings from application config files and an override file.

    Args:
        config_path: Explicit override file. If None, searches default locations.
        search_path: Directories holding application config files. Defaults to
            the override file's ``search_path`` or the current directory.
        **overrides: Values that win over every file (e.g. CLI flags); None is ignored.

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a file is missing, malformed or holds unknown keys
    """
    file_values: dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        file_values = _read_override_file(path)
    else:
        for path in get_config_paths():
            if path.exists():
                file_values = _read_override_file(path)
                break

    roots = search_path or file_values.get("search_path") or ["."]
    if isinstance(roots, str):
        roots = [part.strip() for part in roots.split(",") if part.strip()]

    values: dict[str, Any] = read_application_config(list(roots))
    values.update(file_values)
    values.update({k: v for k, v in overrides.items() if v is not None})
    values["search_path"] = list(roots)

    try:
        return EnvPrinterSettings.model_validate(values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(f"Invalid configuration: {first['msg']}", config_key=key) from e
