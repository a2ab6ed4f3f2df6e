"""Web server command."""

import dataclasses
import os

import click

from ..config import ENV_PREFIX, get_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the API server.

    Host and port fall back to PCOS_COMPANION_HOST and PCOS_COMPANION_PORT.
    With --reload the resolved settings are exported back to those
    variables so the reloaded app sees the same host, port and log level.

    Examples:

        # Start on default port (8000)
        pcos-companion serve

        # Expose to network (all interfaces)
        pcos-companion serve --host 0.0.0.0

        # Development mode with auto-reload
        pcos-companion serve --reload
    """
    import uvicorn

    from ..web import create_app

    settings = get_settings()
    overrides = {"host": host, "port": port, "log_level": (ctx.obj or {}).get("log_level")}
    settings = dataclasses.replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )

    click.echo()
    click.echo(click.style("Starting pcos-companion API...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{settings.host}:{settings.port}")
    click.echo(f"  Docs:    http://{settings.host}:{settings.port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        # The reloader builds the app in a fresh process from the environment
        os.environ.update(
            {
                ENV_PREFIX + "HOST": settings.host,
                ENV_PREFIX + "PORT": str(settings.port),
                ENV_PREFIX + "LOG_LEVEL": settings.log_level,
            }
        )

    uvicorn.run(
        "pcos_companion.web:create_app" if reload else create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
