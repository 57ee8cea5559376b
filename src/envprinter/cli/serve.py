"""CLI command for the HTTP query endpoint."""

from pathlib import Path
from typing import List, Optional

import typer

from envprinter.cli.env import CONFIG_OPTION, SEARCH_PATH_OPTION
from envprinter.cli.utils import console, load_settings_or_exit


def serve_cmd(
    config: Optional[Path] = CONFIG_OPTION,
    search_path: Optional[List[Path]] = SEARCH_PATH_OPTION,
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8080, "--port", "-p", help="Port to listen on"),
) -> None:
    """
    Serve the filtered environment over HTTP.

    Logs the environment at startup, then answers
    GET /env/env-printer and GET /actuator/envprinter.
    """
    import uvicorn

    from envprinter.app import build_engine
    from envprinter.printer import print_environment
    from envprinter.server import create_app

    settings = load_settings_or_exit(config, search_path)
    if not settings.enabled:
        console.print("[yellow]env-printer is disabled by configuration.[/yellow]")
        raise typer.Exit(0)

    engine = build_engine(settings)
    print_environment(engine)
    uvicorn.run(create_app(engine), host=host, port=port)
