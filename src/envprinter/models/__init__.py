"""Data models for env-printer."""

from envprinter.models.common import ErrorRecord
from envprinter.models.env import (
    EMPTY_PLACEHOLDER,
    UNSET_MARKER,
    FilteredResult,
    PatternKind,
    PatternMatch,
)

__all__ = [
    "ErrorRecord",
    "EMPTY_PLACEHOLDER",
    "UNSET_MARKER",
    "FilteredResult",
    "PatternKind",
    "PatternMatch",
]
