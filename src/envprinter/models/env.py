"""Environment variable scanning and filtering data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# Value reported for a referenced variable missing from the environment
UNSET_MARKER = "<unset>"
# Value reported for every variable when values are hidden
EMPTY_PLACEHOLDER = ""


class PatternKind(str, Enum):
    """Textual forms that reference an environment variable."""

    PLACEHOLDER = "placeholder"
    DIRECT_ACCESS = "direct_access"
    INJECTED_VALUE = "injected_value"


class PatternMatch(BaseModel):
    """A candidate name captured from one line of text."""

    model_config = {"frozen": True}

    kind: PatternKind = Field(description="Pattern that produced the match")
    raw: str = Field(description="Captured token before normalization")
    name: str = Field(description="Normalized candidate name")
    accepted: bool = Field(description="Whether the name counts as a used variable")


class FilteredResult(BaseModel):
    """Filtered view of the environment, ordered by variable name."""

    model_config = {"frozen": True}

    variables: dict[str, str] = Field(
        default_factory=dict, description="Name to value, placeholder or unset marker"
    )
    project_only: bool = Field(default=False, description="Filtering mode that produced it")
    show_values: bool = Field(default=False, description="Whether values are real")
    unset: list[str] = Field(
        default_factory=list,
        description="Referenced names with no value in the environment",
    )

    @property
    def names(self) -> list[str]:
        """Reported variable names in order."""
        return list(self.variables)

    def __len__(self) -> int:
        return len(self.variables)
