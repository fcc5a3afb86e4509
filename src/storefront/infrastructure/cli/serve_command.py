"""CLI command that runs the HTTP API."""

from __future__ import annotations

from dataclasses import replace

import click
import uvicorn

from storefront.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: STOREFRONT_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: STOREFRONT_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes.")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None, reload: bool) -> None:
    """Serve the storefront API."""
    settings = replace(
        settings,
        host=host or settings.host,
        port=port or settings.port,
    )
    configure_logging(settings.log_level)

    click.echo(f"Storefront listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "storefront.infrastructure.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_config=None,
    )
