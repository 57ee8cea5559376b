"""HTTP query endpoint for the filtered environment.

Endpoints:
  GET /health
  GET /env/env-printer
  GET /actuator/envprinter
"""

from __future__ import annotations

from fastapi import FastAPI

from envprinter import __version__
from envprinter.core.filter import EnvFilterEngine
from envprinter.utils.logging import get_logger

logger = get_logger(__name__)

ENDPOINT_PATHS = ("/env/env-printer", "/actuator/envprinter")


def create_app(engine: EnvFilterEngine) -> FastAPI:
    """Build the FastAPI app serving the engine's filtered environment.

    The environment routes are only registered when both ``enabled`` and
    ``endpoint_enabled`` are set; otherwise they answer 404.
    """
    app = FastAPI(title="env-printer", version=__version__)

    @app.get("/health")
    def health() -> dict:
        """Simple health endpoint for monitoring."""
        return {"ok": True, "service": "env-printer", "version": __version__}

    settings = engine.settings
    if not (settings.enabled and settings.endpoint_enabled):
        logger.info("Environment endpoint is disabled")
        return app

    def get_environment() -> dict[str, str]:
        """Filtered environment variables, sorted by name."""
        return engine.get_filtered_environment().variables

    for path in ENDPOINT_PATHS:
        app.add_api_route(path, get_environment, methods=["GET"])

    return app
