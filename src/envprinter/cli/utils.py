"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from envprinter.utils.config import EnvPrinterSettings, load_settings
from envprinter.utils.errors import ConfigurationError

# Shared console instance
console = Console()


def load_settings_or_exit(
    config: Path | None,
    search_path: list[Path] | None,
    **overrides: Any,
) -> EnvPrinterSettings:
    """Load settings, exiting with status 1 on a configuration error.

    Args:
        config: Explicit config file, if given
        search_path: Directories holding application config files, if given
        **overrides: CLI flag values; None means not given

    Returns:
        Loaded settings
    """
    try:
        return load_settings(
            config_path=config,
            search_path=[str(p) for p in search_path] if search_path else None,
            **overrides,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e.to_error_record()))}")
        raise typer.Exit(1)


def output_json(data: dict[str, Any] | BaseModel, output: Path | None = None) -> None:
    """Output data as JSON to console or file.

    Args:
        data: Data to output (dict or Pydantic model)
        output: Optional output file path
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")

    json_str = json.dumps(data, indent=2, default=str)

    if output:
        output.write_text(json_str)
        console.print(f"Report written to {output}")
    else:
        console.print_json(json_str)
