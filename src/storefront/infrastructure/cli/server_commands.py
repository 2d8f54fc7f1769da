"""CLI command that runs the catalog API."""

from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logger import get_logger, set_level

logger = get_logger("server")


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: PORT or 4000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the catalog API server."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))

    set_level(settings.log_level)
    host = host or settings.host
    port = port or settings.port

    logger.info("API running at http://%s:%d", host, port)
    uvicorn.run(
        "storefront.infrastructure.api.app:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
