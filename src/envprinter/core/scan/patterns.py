"""Textual patterns that reference environment variables."""

from __future__ import annotations

import re
from typing import Iterator

from envprinter.models.env import PatternKind, PatternMatch

# Checked in order; only the first matching prefix is stripped
ACCESS_PREFIXES = ("env.", "environment.", "sys.", "system.")

PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}:]+)(?::[^}]*)?\}")
DIRECT_ACCESS_PATTERN = re.compile(r"System\.getenv\([\"']([^\"']+)[\"']\)")
INJECTED_VALUE_PATTERN = re.compile(r"@Value\([\"']\$\{([^}:]+)(?::[^}]*)?\}[\"']\)")

_ENV_VAR_SHAPE = re.compile(r"^[A-Z][A-Z0-9_]*$")


def normalize_name(raw: str) -> str:
    """Strip a leading access prefix such as ``env.`` from a captured token."""
    for prefix in ACCESS_PREFIXES:
        if raw.startswith(prefix):
            return raw[len(prefix):]
    return raw


def is_likely_env_var(name: str) -> bool:
    """Check whether a name looks like an environment variable.

    Upper-case names (``PORT``) and anything containing an underscore
    (``db_host``) qualify; dotted property keys such as ``server.port`` do not.
    """
    if not name:
        return False
    return bool(_ENV_VAR_SHAPE.match(name)) or "_" in name


class PatternScanner:
    """Extracts candidate variable names from single lines of text.

    Each pattern is applied independently, so a line such as
    ``@Value("${DB_URL}")`` is reported by both the placeholder and the
    injected-value pattern. Callers fold the names into a set.
    """

    PATTERNS: tuple[tuple[PatternKind, re.Pattern[str], bool], ...] = (
        (PatternKind.PLACEHOLDER, PLACEHOLDER_PATTERN, True),
        (PatternKind.INJECTED_VALUE, INJECTED_VALUE_PATTERN, True),
        # getenv names are exact by construction and skip the shape check
        (PatternKind.DIRECT_ACCESS, DIRECT_ACCESS_PATTERN, False),
    )

    def matches(self, line: str) -> Iterator[PatternMatch]:
        """Yield every match on a line, accepted or not."""
        for kind, pattern, validate in self.PATTERNS:
            for m in pattern.finditer(line):
                raw = m.group(1).strip()
                name = normalize_name(raw)
                accepted = is_likely_env_var(name) if validate else True
                yield PatternMatch(kind=kind, raw=raw, name=name, accepted=accepted)

    def accepted_names(self, line: str) -> Iterator[str]:
        """Yield the names on a line that count as used variables."""
        for match in self.matches(line):
            if match.accepted:
                yield match.name
