from __future__ import annotations

import click
import uvicorn

from meetzone.config import load_settings


@click.command()
@click.option("--host", default=None, help="Bind address; defaults to APP_HOST.")
@click.option("--port", type=int, default=None, help="Bind port; defaults to APP_PORT.")
def serve(host: str | None, port: int | None) -> None:
    """Serve the conversion HTTP API."""
    settings = load_settings()
    uvicorn.run(
        "meetzone.main:app",
        host=host or settings.app_host,
        port=port or settings.app_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    serve()
