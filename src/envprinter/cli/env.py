"""CLI commands for reporting environment variables."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from envprinter.cli.utils import console, load_settings_or_exit, output_json
from envprinter.models.env import FilteredResult

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to an env-printer YAML config file",
)
SEARCH_PATH_OPTION = typer.Option(
    None,
    "--search-path",
    "-s",
    help="Directory holding application*.properties / application*.yml (repeatable)",
)


def print_cmd(
    config: Optional[Path] = CONFIG_OPTION,
    search_path: Optional[List[Path]] = SEARCH_PATH_OPTION,
) -> None:
    """
    Log the filtered environment under a banner, as done at startup.

    Values are only printed when show-values is enabled in the
    configuration. That writes secrets to the log; enable it knowingly.
    """
    from envprinter.app import build_engine
    from envprinter.printer import print_environment

    settings = load_settings_or_exit(config, search_path)
    print_environment(build_engine(settings))


def show_cmd(
    config: Optional[Path] = CONFIG_OPTION,
    search_path: Optional[List[Path]] = SEARCH_PATH_OPTION,
    all_vars: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Report every non-excluded variable instead of project-used ones",
    ),
    show_values: Optional[bool] = typer.Option(
        None,
        "--show-values/--hide-values",
        help="Override whether values are shown (shown values may include secrets)",
    ),
    format: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
) -> None:
    """
    Show the filtered environment.

    Example:
        env-printer show --search-path src/main/resources --format json
    """
    from envprinter.app import build_engine

    settings = load_settings_or_exit(
        config,
        search_path,
        project_only=False if all_vars else None,
        show_values=show_values,
    )
    if not settings.enabled:
        console.print("[yellow]env-printer is disabled by configuration.[/yellow]")
        raise typer.Exit(0)

    with console.status("Scanning environment variable usage..."):
        result = build_engine(settings).get_filtered_environment()

    if format == "json":
        output_json(result.variables, output)
    else:
        _print_result(result)


def _print_result(result: FilteredResult) -> None:
    """Print a rich terminal table of the result."""
    mode = "project-only" if result.project_only else "all (noise excluded)"
    console.print()
    console.print(
        Panel(
            f"[bold]Mode:[/bold] {mode}\n"
            f"[bold]Variables:[/bold] {len(result)}\n"
            f"[bold]Unset:[/bold] {len(result.unset)}",
            title="Environment Variables",
        )
    )

    if not result.variables:
        console.print()
        console.print("[yellow]No environment variables to report.[/yellow]")
        return

    console.print()
    table = Table()
    table.add_column("Name", style="bold")
    if result.show_values:
        table.add_column("Value", max_width=60)

    unset = set(result.unset)
    for name, value in result.variables.items():
        label = f"{escape(name)} [dim](unset)[/dim]" if name in unset else escape(name)
        if result.show_values:
            table.add_row(label, "[dim]unset[/dim]" if name in unset else escape(value))
        else:
            table.add_row(label)

    console.print(table)


def scan_cmd(
    config: Optional[Path] = CONFIG_OPTION,
    search_path: Optional[List[Path]] = SEARCH_PATH_OPTION,
    format: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
) -> None:
    """
    List the environment variables referenced by application config files.

    Example:
        env-printer scan -s config -s src/main/resources
    """
    from envprinter.core.scan import EnvUsageScanner, FilesystemResourceWalker

    settings = load_settings_or_exit(config, search_path)
    if not settings.enabled:
        console.print("[yellow]env-printer is disabled by configuration.[/yellow]")
        raise typer.Exit(0)
    scanner = EnvUsageScanner(FilesystemResourceWalker(settings.search_path))

    with console.status("Scanning..."):
        names = sorted(scanner.scan())

    if format == "json":
        output_json({"count": len(names), "variables": names})
        return

    console.print()
    console.print(
        Panel(
            f"[bold]Search path:[/bold] {', '.join(settings.search_path)}\n"
            f"[bold]Variables:[/bold] {len(names)}",
            title="Environment Variable Usage",
        )
    )
    for name in names:
        console.print(f"  {escape(name)}")
