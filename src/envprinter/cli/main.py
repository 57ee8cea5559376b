"""Main CLI entry point for env-printer."""

import typer
from rich.console import Console

from envprinter.cli import env, serve

app = typer.Typer(
    name="env-printer",
    help="Report the environment variables a project actually uses.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="print")(env.print_cmd)
app.command(name="show")(env.show_cmd)
app.command(name="scan")(env.scan_cmd)
app.command(name="serve")(serve.serve_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    structured: bool = typer.Option(
        False, "--structured-logs", help="Log with timestamps and key=value fields"
    ),
) -> None:
    """
    env-printer: report the environment variables a project actually uses.

    - [bold]print[/bold]: Log the filtered environment under a banner
    - [bold]show[/bold]: Show the filtered environment as a table or JSON
    - [bold]scan[/bold]: List variables referenced by application config files
    - [bold]serve[/bold]: Serve the filtered environment over HTTP
    """
    from envprinter.utils.logging import configure_logging

    if verbose:
        configure_logging(level="DEBUG", structured=structured)
    elif quiet:
        configure_logging(level="WARNING", structured=structured)
    else:
        configure_logging(level="INFO", structured=structured)


@app.command()
def version() -> None:
    """Show the env-printer version."""
    from envprinter import __version__

    console.print(f"env-printer version {__version__}")


if __name__ == "__main__":
    app()
